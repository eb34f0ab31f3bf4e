from datetime import datetime

from coordmap import create_app


def test_app_creation(app):
    """测试：应用实例是否能被成功创建"""
    assert app is not None
    assert app.config['TESTING'] is True


def test_config_overrides_apply():
    app = create_app('testing', config_overrides={'MAX_BATCH_POINTS': 3})
    assert app.config['MAX_BATCH_POINTS'] == 3


def test_health_check(client):
    """测试：健康检查接口返回 200 和状态信息"""
    response = client.get('/api/health')
    assert response.status_code == 200
    json_data = response.get_json()
    assert json_data['status'] == 'ok'
    assert datetime.fromisoformat(json_data['timestamp']).tzinfo is not None


def test_providers_listing(client):
    response = client.get('/api/providers')
    json_data = response.get_json()
    assert response.status_code == 200
    assert json_data['default'] == 'gaode'
    systems = {p['name']: p['native_system'] for p in json_data['providers']}
    assert systems == {'gaode': 'GCJ02', 'osm': 'WGS84'}


def test_log_records_carry_request_context(app, caplog):
    """测试：请求期间的日志记录带有上下文前缀"""
    client = app.test_client()
    with caplog.at_level('INFO', logger=app.logger.name):
        client.post('/api/convert', json={'lng': 116.4074, 'lat': 39.9042, 'from': 'wgs84', 'to': 'gcj02'})
    contexts = [getattr(r, 'context', None) for r in caplog.records]
    assert '[convert wgs84->gcj02] ' in contexts
