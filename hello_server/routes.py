from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request
from werkzeug.exceptions import HTTPException, NotFound

bp = Blueprint("main", __name__)
logger = logging.getLogger(__name__)


@bp.get('/')
def home():
    return 'Hello World'


@bp.get('/health')
def health():
    return jsonify(status='OK')


def not_found(e: HTTPException):
    # Known path with an unregistered method is still a miss, not a 405
    logger.debug("%s %s -> 404", request.method, request.path)
    return NotFound().get_response()
