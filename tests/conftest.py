import pytest
from coordconv import create_app

@pytest.fixture(scope='session')
def app():
    """
    创建一个作用域为 'session' 的应用实例。
    """
    app = create_app('testing', config_overrides={
        'TESTING': True,
        'COORD_DECIMALS': 6,
    })
    yield app

@pytest.fixture
def client(app):
    """为应用创建一个测试客户端"""
    return app.test_client()

@pytest.fixture
def runner(app):
    """为应用创建一个命令行运行器"""
    return app.test_cli_runner()
