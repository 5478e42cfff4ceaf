import pytest


def test_expand_with_location(client):
    """测试：GET /coord/expand 使用 location 参数"""
    response = client.get('/coord/expand', query_string={'system': 'GCJ02', 'location': '116.404,39.915'})
    json_data = response.get_json()
    assert response.status_code == 200
    assert json_data['success'] is True
    assert [r['system'] for r in json_data['results']] == ['GCJ02', 'BD09', 'WGS84']
    assert json_data['results'][0] == {'system': 'GCJ02', 'longitude': 116.404, 'latitude': 39.915}

def test_expand_with_json_body(client):
    """测试：POST /coord/expand 支持数字形式的经纬度"""
    response = client.post('/coord/expand', json={'system': 'wgs84', 'lng': 116.403988, 'lat': 39.914957})
    json_data = response.get_json()
    assert response.status_code == 200
    assert [r['system'] for r in json_data['results']] == ['WGS84', 'GCJ02', 'BD09']
    assert json_data['results'][1]['longitude'] == pytest.approx(116.41023249560487, abs=1e-9)
    assert json_data['results'][1]['latitude'] == pytest.approx(39.91636128043605, abs=1e-9)

def test_expand_unknown_system(client):
    response = client.get('/coord/expand', query_string={'system': 'INVALID', 'location': '0,0'})
    json_data = response.get_json()
    assert response.status_code == 400
    assert json_data['success'] is False
    assert 'INVALID' in json_data['message']

def test_expand_malformed_location(client):
    response = client.get('/coord/expand', query_string={'system': 'GCJ02', 'location': '116.404'})
    assert response.status_code == 400
    assert response.get_json()['success'] is False

def test_expand_missing_fields(client):
    response = client.post('/coord/expand', json={'system': 'GCJ02'})
    assert response.status_code == 400
    response = client.post('/coord/expand', json={'location': '116.404,39.915'})
    assert response.status_code == 400

def test_convert(client):
    response = client.get('/coord/convert', query_string={
        'system': 'GCJ02', 'to': 'BD09', 'lng': '116.410321', 'lat': '39.916470'})
    json_data = response.get_json()
    assert response.status_code == 200
    assert json_data['result']['system'] == 'BD09'
    assert json_data['result']['longitude'] == pytest.approx(116.41670394796621, abs=1e-9)
    assert json_data['result']['latitude'] == pytest.approx(39.92276453906239, abs=1e-9)

def test_convert_missing_target(client):
    response = client.post('/coord/convert', json={'system': 'GCJ02', 'location': '116.404,39.915'})
    json_data = response.get_json()
    assert response.status_code == 400
    assert 'to' in json_data['message']

def test_convert_unknown_target(client):
    response = client.post('/coord/convert', json={'system': 'GCJ02', 'location': '116.404,39.915', 'to': 'UTM'})
    assert response.status_code == 400

@pytest.mark.parametrize('body', [['GCJ02', '116.404,39.915'], 'GCJ02 116.404,39.915'])
def test_expand_rejects_non_object_json(client, body):
    """测试：JSON 请求体不是对象时返回 400 而不是 500"""
    response = client.post('/coord/expand', json=body)
    json_data = response.get_json()
    assert response.status_code == 400
    assert json_data['success'] is False

def test_convert_rejects_non_object_json(client):
    response = client.post('/coord/convert', json=['GCJ02', 'BD09', '116.404,39.915'])
    assert response.status_code == 400
    assert response.get_json()['success'] is False
