"""
Admin reporting routes (read-only)
"""

from flask import Blueprint, request, jsonify
from acadreq.models import db
from acadreq.services import RequestService, compute_stats
from acadreq.utils import AcadReqException, log_error, create_response, token_required, role_required

admin_bp = Blueprint('admin', __name__)


@admin_bp.route('/requests', methods=['GET'])
@token_required
@role_required('admin')
def get_all_requests():
    """Get all requests with optional filters and statistics"""
    try:
        args = request.args
        requests = RequestService(db.session).filter_requests(
            requester_id=args.get('requesterId') or args.get('studentId'),
            requester_role=args.get('requesterRole'),
            status=args.get('status'),
            start_date=args.get('startDate'),
            end_date=args.get('endDate'),
        )
        return jsonify(create_response(True, "Requests retrieved", stats=compute_stats(requests),
                                       count=len(requests), requests=[r.to_dict() for r in requests]))

    except AcadReqException as e:
        return jsonify(create_response(False, str(e))), e.status_code
    except Exception as e:
        log_error("Get all requests error", e)
        return jsonify(create_response(False, "Error fetching requests", error=str(e))), 500
