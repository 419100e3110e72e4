"""
Request workflow service

Owns every mutation of a Request. Transitions are applied as a single
conditional UPDATE guarded on the gate still being pending, so two callers
racing on the same request cannot both resolve it: the first writer wins and
the second gets InvalidStateError.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session
from acadreq.models import (
    Request, Status, RequesterRole, DECISIONS,
    TITLE_MAX_LENGTH, DESCRIPTION_MAX_LENGTH
)
from acadreq.utils.exceptions import (
    ValidationError, NotFoundError, InvalidStateError, StoreUnavailableError
)
from acadreq.utils.helpers import utcnow, parse_datetime
from acadreq.utils.validators import validate_text_field, validate_choice

logger = logging.getLogger(__name__)

DateLike = Union[str, datetime, None]


def compute_stats(requests: Iterable[Request]) -> Dict[str, int]:
    """
    Aggregate counts over a set of requests

    ``pending``/``approved``/``rejected`` count final statuses, so
    ``total == pending + approved + rejected`` always holds.
    """
    stats = {
        'total': 0,
        'pending': 0,
        'approved': 0,
        'rejected': 0,
        'staffPending': 0,
        'hodPending': 0,
    }
    for request in requests:
        stats['total'] += 1
        stats[request.final_status.value] += 1
        if request.awaiting_staff:
            stats['staffPending'] += 1
        if request.awaiting_hod:
            stats['hodPending'] += 1
    return stats


class RequestService:
    """Request workflow engine bound to an explicit session"""

    def __init__(self, session: Session):
        self.session = session

    def _query(self):
        return self.session.query(Request)

    def _newest_first(self, query) -> List[Request]:
        return query.order_by(Request.created_at.desc(), Request.id.desc()).all()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except OperationalError as e:
            self.session.rollback()
            raise StoreUnavailableError(f"Record store unavailable: {e.orig}") from e

    def _read(self, fn):
        try:
            return fn()
        except OperationalError as e:
            self.session.rollback()
            raise StoreUnavailableError(f"Record store unavailable: {e.orig}") from e

    # ---------------------------------------------------------------- create

    def submit(self, requester_id: int, requester_role: str, title: Any, description: Any) -> Request:
        """
        Create a request in the initial state of the requester's track

        Args:
            requester_id: Submitting user id
            requester_role: ``student`` or ``staff``
            title: 1-200 characters after trimming
            description: 1-1000 characters after trimming

        Returns:
            The persisted request

        Raises:
            ValidationError: On invalid title, description or role
        """
        role = RequesterRole(validate_choice(
            getattr(requester_role, 'value', requester_role),
            [r.value for r in RequesterRole], 'requester role'
        ))
        title = validate_text_field(title, 'Title', TITLE_MAX_LENGTH)
        description = validate_text_field(description, 'Description', DESCRIPTION_MAX_LENGTH)

        request = Request.initial(requester_id, role, title, description)
        self.session.add(request)
        self._commit()
        logger.info("Request %s submitted by %s %s", request.id, role.value, requester_id)
        return request

    # ------------------------------------------------------------- worklists

    def list_staff_pending(self) -> List[Request]:
        """Student requests awaiting the staff gate, newest first"""
        return self._read(lambda: self._newest_first(self._query().filter(Request.awaiting_staff)))

    def list_hod_pending(self) -> List[Request]:
        """Requests awaiting the HOD gate on either track, newest first"""
        return self._read(lambda: self._newest_first(self._query().filter(Request.awaiting_hod)))

    def list_for_requester(self, requester_id: int) -> Tuple[List[Request], Dict[str, int]]:
        """Requests owned by a requester together with their statistics"""
        requests = self._read(lambda: self._newest_first(
            self._query().filter(Request.requester_id == requester_id)
        ))
        return requests, compute_stats(requests)

    # ----------------------------------------------------------- transitions

    def get(self, request_id: str) -> Request:
        request = self._read(lambda: self.session.get(Request, request_id))
        if request is None:
            raise NotFoundError("Request not found")
        return request

    def _apply(self, request_id: str, guard, changes: Dict[str, Any]) -> bool:
        """Conditional update; True when exactly this caller resolved the gate"""
        try:
            updated = (
                self._query()
                .filter(Request.id == request_id, *guard)
                .update(changes, synchronize_session=False)
            )
        except OperationalError as e:
            self.session.rollback()
            raise StoreUnavailableError(f"Record store unavailable: {e.orig}") from e
        if updated != 1:
            self.session.rollback()
            return False
        self._commit()
        return True

    def staff_decide(self, request_id: str, decision: str) -> Request:
        """
        Resolve the staff gate of a student request

        Rejection is terminal and sets the final status immediately; approval
        moves the request to the HOD worklist.

        Raises:
            ValidationError: decision is not approved/rejected
            NotFoundError: unknown request id
            InvalidStateError: the staff gate was already resolved
        """
        decision = Status(validate_choice(decision, DECISIONS, 'status'))
        now = utcnow()
        changes = {
            Request.staff_status: decision,
            Request.staff_updated_at: now,
        }
        if decision == Status.REJECTED:
            changes[Request.final_status] = Status.REJECTED

        if not self._apply(request_id, [Request.staff_status == Status.PENDING], changes):
            current = self.get(request_id)
            self.session.refresh(current)
            if current.is_terminal:
                logger.warning("Staff decision on %s refused: already %s", request_id, current.final_status.value)
                raise InvalidStateError(f"Request is already finalized as {current.final_status.value}")
            logger.warning("Staff decision on %s refused: already processed", request_id)
            raise InvalidStateError("Request has already been processed by staff")

        request = self.get(request_id)
        self.session.refresh(request)
        logger.info("Request %s %s by staff", request_id, decision.value)
        return request

    def hod_decide(self, request_id: str, decision: str) -> Request:
        """
        Resolve the HOD gate; the decision becomes the final status

        Raises:
            ValidationError: decision is not approved/rejected
            NotFoundError: unknown request id
            InvalidStateError: staff gate not approved, or HOD gate already resolved
        """
        decision = Status(validate_choice(decision, DECISIONS, 'status'))
        changes = {
            Request.hod_status: decision,
            Request.hod_updated_at: utcnow(),
            Request.final_status: decision,
        }
        guard = [
            Request.staff_status == Status.APPROVED,
            Request.hod_status == Status.PENDING,
        ]

        if not self._apply(request_id, guard, changes):
            current = self.get(request_id)
            self.session.refresh(current)
            if current.staff_status != Status.APPROVED:
                logger.warning("HOD decision on %s refused: staff approval missing", request_id)
                raise InvalidStateError("Staff approval required first")
            logger.warning("HOD decision on %s refused: already processed", request_id)
            raise InvalidStateError("Request has already been processed by HOD")

        request = self.get(request_id)
        self.session.refresh(request)
        logger.info("Request %s %s by HOD", request_id, decision.value)
        return request

    # ------------------------------------------------------------- reporting

    def filter_requests(self, requester_id: Optional[int] = None,
                        requester_role: Optional[str] = None,
                        status: Optional[str] = None,
                        start_date: DateLike = None,
                        end_date: DateLike = None) -> List[Request]:
        """
        All requests matching every given filter, newest first

        The creation-time range is inclusive on both ends; a date-only
        ``end_date`` covers that whole day.
        """
        query = self._query()

        if requester_id is not None and requester_id != '':
            try:
                requester_id = int(requester_id)
            except (TypeError, ValueError):
                raise ValidationError("Invalid requester id")
            query = query.filter(Request.requester_id == requester_id)

        if requester_role:
            role = validate_choice(requester_role, [r.value for r in RequesterRole], 'requester role')
            query = query.filter(Request.requester_role == RequesterRole(role))

        if status:
            status = validate_choice(status, [s.value for s in Status], 'status')
            query = query.filter(Request.final_status == Status(status))

        start = parse_datetime(start_date, 'startDate')
        end = parse_datetime(end_date, 'endDate', end_of_day=True)
        if start is not None:
            query = query.filter(Request.created_at >= start)
        if end is not None:
            query = query.filter(Request.created_at <= end)

        return self._read(lambda: self._newest_first(query))
