from flask import Flask, make_response, request

from api._shared import DEFAULT_HEADERS, json_response
from api.schools import get_all_schools, get_school_by_id, get_schools_by_year

# Vercel: export a WSGI Flask app named `app` with ONLY API routes (no static serving)
app = Flask(__name__)


def _event(**path_parameters):
    """Build the gateway-style event the handlers expect from the Flask request."""
    return {
        'httpMethod': request.method,
        'path': request.path,
        'pathParameters': path_parameters or None,
        'queryStringParameters': request.args.to_dict() or None,
    }


def _to_response(envelope):
    resp = make_response(envelope['body'], envelope['statusCode'])
    for k, v in (envelope.get('headers') or {}).items():
        resp.headers[k] = v
    return resp


@app.before_request
def cors_preflight():
    if request.method == 'OPTIONS':
        resp = make_response('', 204)
        for k, v in DEFAULT_HEADERS.items():
            resp.headers[k] = v
        return resp
    return None


@app.get('/schools')
@app.get('/api/schools')
def api_schools():
    return _to_response(get_all_schools(_event()))


@app.get('/schools/year/')
@app.get('/api/schools/year/')
def api_schools_by_year_missing():
    return _to_response(get_schools_by_year(_event()))


@app.get('/schools/year/<academicYear>')
@app.get('/api/schools/year/<academicYear>')
def api_schools_by_year(academicYear):
    return _to_response(get_schools_by_year(_event(academicYear=academicYear)))


@app.get('/schools/<schoolId>')
@app.get('/api/schools/<schoolId>')
def api_school_by_id(schoolId):
    return _to_response(get_school_by_id(_event(schoolId=schoolId)))


@app.get('/health')
@app.get('/api/health')
def api_health():
    return _to_response(json_response({'ok': True}))
