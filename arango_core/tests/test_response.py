import json

from arango_core.response import Response


def make_response(status_code, body, status_text=None):
    return Response(
        method='get',
        url='http://localhost:8529/_api/version',
        headers={},
        status_code=status_code,
        status_text=status_text,
        body=body
    )


def test_success():
    res = make_response(200, json.dumps({'version': '1.4.0'}), 'OK')
    assert res.ok is True
    assert res.body == {'version': '1.4.0'}
    assert res.error_number is None
    assert repr(res) == \
        '<ArangoDB response GET http://localhost:8529/_api/version [200]>'


def test_server_error_fields():
    res = make_response(400, json.dumps({
        'error': True,
        'errorNum': 1501,
        'errorMessage': 'syntax error'
    }), 'Bad Request')
    assert res.ok is False
    assert res.error_number == 1501
    assert res.error_message == 'syntax error'


def test_error_without_json():
    res = make_response(502, '<html>Bad Gateway</html>', 'Bad Gateway')
    assert res.body is None
    assert res.raw_body == '<html>Bad Gateway</html>'
    assert res.error_number is None
    assert res.error_message == 'Bad Gateway'

    res = make_response(500, None)
    assert res.error_message == 'request failed'


def test_error_fields_of_list_body():
    res = make_response(200, json.dumps([1, 2]))
    assert res.body == [1, 2]
    assert res.error_number is None
