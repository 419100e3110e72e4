"""
HOD routes
"""

from flask import Blueprint, jsonify
from acadreq.models import db
from acadreq.services import RequestService
from acadreq.utils import AcadReqException, log_error, create_response, json_body, token_required, role_required

hod_bp = Blueprint('hod', __name__)


@hod_bp.route('/requests', methods=['GET'])
@token_required
@role_required('hod')
def get_approved_requests():
    """Get staff-approved student requests and staff self-requests pending HOD approval"""
    try:
        requests = RequestService(db.session).list_hod_pending()
        return jsonify(create_response(True, "Pending requests retrieved", count=len(requests),
                                       requests=[r.to_dict() for r in requests]))

    except AcadReqException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get approved requests error", e)
        return jsonify(create_response(False, "Error fetching approved requests", error=str(e))), 500


@hod_bp.route('/request/<request_id>', methods=['PUT'])
@token_required
@role_required('hod')
def update_request_status(request_id):
    """Final approval or rejection by the HOD"""
    try:
        data = json_body()

        updated = RequestService(db.session).hod_decide(request_id, data.get('status'))
        return jsonify(create_response(True, f"Request {updated.hod_status.value} successfully by HOD",
                                       request=updated.to_dict()))

    except AcadReqException as e:
        db.session.rollback()
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("HOD update request status error", e)
        db.session.rollback()
        return jsonify(create_response(False, "Error updating request status", error=str(e))), 500
