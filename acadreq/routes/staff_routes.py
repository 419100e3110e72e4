"""
Staff routes
"""

from flask import Blueprint, jsonify, g
from acadreq.models import db, RequesterRole
from acadreq.services import RequestService
from acadreq.utils import AcadReqException, log_error, create_response, json_body, token_required, role_required

staff_bp = Blueprint('staff', __name__)


@staff_bp.route('/requests', methods=['GET'])
@token_required
@role_required('staff')
def get_pending_requests():
    """Get student requests awaiting staff approval"""
    try:
        requests = RequestService(db.session).list_staff_pending()
        return jsonify(create_response(True, "Pending requests retrieved", count=len(requests),
                                       requests=[r.to_dict() for r in requests]))

    except AcadReqException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get pending requests error", e)
        return jsonify(create_response(False, "Error fetching pending requests", error=str(e))), 500


@staff_bp.route('/request/<request_id>', methods=['PUT'])
@token_required
@role_required('staff')
def update_request_status(request_id):
    """Approve or reject a student request"""
    try:
        data = json_body()

        updated = RequestService(db.session).staff_decide(request_id, data.get('status'))
        return jsonify(create_response(True, f"Request {updated.staff_status.value} successfully",
                                       request=updated.to_dict()))

    except AcadReqException as e:
        db.session.rollback()
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Update request status error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Error updating request status", error=str(e))), 500


@staff_bp.route('/request', methods=['POST'])
@token_required
@role_required('staff')
def submit_my_request():
    """Submit a staff self-request, which goes straight to the HOD"""
    try:
        data = json_body()

        created = RequestService(db.session).submit(
            g.user.id, RequesterRole.STAFF, data.get('title'), data.get('description')
        )
        return jsonify(create_response(True, "Request submitted successfully", request=created.to_dict())), 201

    except AcadReqException as e:
        db.session.rollback()
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Submit staff request error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Error submitting request", error=str(e))), 500


@staff_bp.route('/my-requests', methods=['GET'])
@token_required
@role_required('staff')
def get_my_requests():
    """Get requests submitted by the logged-in staff member"""
    try:
        requests, stats = RequestService(db.session).list_for_requester(g.user.id)
        return jsonify(create_response(True, "Requests retrieved", stats=stats, count=len(requests),
                                       requests=[r.to_dict() for r in requests]))

    except AcadReqException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get staff requests error", e)
        return jsonify(create_response(False, "Error fetching requests", error=str(e))), 500
