from api._db import get_schools_collection
from api._shared import (
    ACADEMIC_YEAR_REQUIRED,
    INTERNAL_ERROR,
    SCHOOL_ID_REQUIRED,
    SCHOOL_NOT_FOUND,
    MissingParameter,
    all_schools_filter,
    error_response,
    json_response,
    logger,
    require_path_param,
    school_id_filter,
    year_filter,
)


def _collection(collection):
    return collection if collection is not None else get_schools_collection()


def get_all_schools(event, context=None, collection=None):
    try:
        schools = list(_collection(collection).find(all_schools_filter()))
        logger.info("get_all_schools: count=%d", len(schools))
        return json_response(schools, 200)
    except Exception:  # noqa: BLE001
        logger.exception("get_all_schools failed")
        return error_response(INTERNAL_ERROR, 500)


def get_schools_by_year(event, context=None, collection=None):
    try:
        academic_year = require_path_param(event, 'academicYear', ACADEMIC_YEAR_REQUIRED)
    except MissingParameter as e:
        return error_response(e.message, 400)
    try:
        schools = list(_collection(collection).find(year_filter(academic_year)))
        # An unmatched year is an empty list, not a 404
        logger.info("get_schools_by_year: academicYear=%s count=%d", academic_year, len(schools))
        return json_response(schools, 200)
    except Exception:  # noqa: BLE001
        logger.exception("get_schools_by_year failed: academicYear=%s", academic_year)
        return error_response(INTERNAL_ERROR, 500)


def get_school_by_id(event, context=None, collection=None):
    try:
        school_id = require_path_param(event, 'schoolId', SCHOOL_ID_REQUIRED)
    except MissingParameter as e:
        return error_response(e.message, 400)
    try:
        school = _collection(collection).find_one(school_id_filter(school_id))
        if school is None:
            logger.info("get_school_by_id: schoolId=%s not found", school_id)
            return error_response(SCHOOL_NOT_FOUND, 404)
        logger.info("get_school_by_id: schoolId=%s found", school_id)
        return json_response(school, 200)
    except Exception:  # noqa: BLE001
        logger.exception("get_school_by_id failed: schoolId=%s", school_id)
        return error_response(INTERNAL_ERROR, 500)
