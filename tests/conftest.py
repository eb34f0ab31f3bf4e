import pytest
from coordmap import create_app

@pytest.fixture
def app():
    """创建一个用于测试的应用实例。"""
    app = create_app('testing', config_overrides={
        'DEFAULT_MAP_PROVIDER': 'gaode',
        'DEFAULT_COORD_FORMAT': 'decimal',
    })
    yield app

@pytest.fixture
def client(app):
    """为应用创建一个测试客户端"""
    return app.test_client()
