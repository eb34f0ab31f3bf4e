from datetime import datetime, timezone

from flask import Blueprint, jsonify

main_bp = Blueprint('main', __name__)

@main_bp.route('/api/health', methods=['GET'])
def health():
    """健康检查路由"""
    return jsonify({
        'status': 'ok',
        'message': '经纬度查询工具运行正常',
        'timestamp': datetime.now(timezone.utc).isoformat()
    })
