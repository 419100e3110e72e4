"""
Student routes
"""

from flask import Blueprint, jsonify, g
from acadreq.models import db, RequesterRole
from acadreq.services import RequestService
from acadreq.utils import AcadReqException, log_error, create_response, json_body, token_required, role_required

student_bp = Blueprint('student', __name__)


@student_bp.route('/request', methods=['POST'])
@token_required
@role_required('student')
def submit_request():
    """Submit a new request"""
    try:
        data = json_body()

        created = RequestService(db.session).submit(
            g.user.id, RequesterRole.STUDENT, data.get('title'), data.get('description')
        )
        return jsonify(create_response(True, "Request submitted successfully", request=created.to_dict())), 201

    except AcadReqException as e:
        db.session.rollback()
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Submit request error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Error submitting request", error=str(e))), 500


@student_bp.route('/requests', methods=['GET'])
@token_required
@role_required('student')
def get_my_requests():
    """Get all requests for the logged-in student"""
    try:
        requests, stats = RequestService(db.session).list_for_requester(g.user.id)
        return jsonify(create_response(True, "Requests retrieved", stats=stats, count=len(requests),
                                       requests=[r.to_dict() for r in requests]))

    except AcadReqException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get my requests error", e)
        return jsonify(create_response(False, "Error fetching requests", error=str(e))), 500
