"""
Academic request model

A request follows one of two gate sequences, chosen by ``requester_role``:

* student track: staff gate, then HOD gate
* staff track: the staff gate is approved at creation, only the HOD gate applies

``final_status`` is rejected as soon as any gate rejects and approved only
when the HOD gate approves.
"""

import enum
import uuid
from sqlalchemy import and_, or_
from sqlalchemy.ext.hybrid import hybrid_property
from acadreq.models.user import db
from acadreq.utils.helpers import utcnow, isoformat

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 1000


class Status(str, enum.Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


class RequesterRole(str, enum.Enum):
    STUDENT = 'student'
    STAFF = 'staff'


DECISIONS = (Status.APPROVED.value, Status.REJECTED.value)


def _enum_column(enum_cls, name, **kwargs):
    return db.Column(
        db.Enum(enum_cls, values_callable=lambda e: [m.value for m in e], name=name),
        nullable=False, **kwargs
    )


class Request(db.Model):
    """Academic request with staff and HOD approval gates"""
    __tablename__ = 'requests'
    __table_args__ = (
        db.Index('ix_requests_requester_created', 'requester_id', 'created_at'),
        db.Index('ix_requests_staff_status', 'staff_status'),
        db.Index('ix_requests_hod_staff_status', 'hod_status', 'staff_status'),
    )

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    requester_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    requester_role = _enum_column(RequesterRole, 'requester_role')
    title = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    description = db.Column(db.String(DESCRIPTION_MAX_LENGTH), nullable=False)
    staff_status = _enum_column(Status, 'staff_status', default=Status.PENDING)
    hod_status = _enum_column(Status, 'hod_status', default=Status.PENDING)
    final_status = _enum_column(Status, 'final_status', default=Status.PENDING)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    staff_updated_at = db.Column(db.DateTime, nullable=True)
    hod_updated_at = db.Column(db.DateTime, nullable=True)

    requester = db.relationship('User', back_populates='requests', lazy='joined')

    @classmethod
    def initial(cls, requester_id, requester_role, title, description, now=None):
        """Build a new request in the initial state of its track"""
        now = now or utcnow()
        request = cls(
            requester_id=requester_id,
            requester_role=requester_role,
            title=title,
            description=description,
            hod_status=Status.PENDING,
            final_status=Status.PENDING,
            created_at=now,
        )
        if requester_role == RequesterRole.STAFF:
            # Self-requests skip the staff gate
            request.staff_status = Status.APPROVED
            request.staff_updated_at = now
        elif requester_role == RequesterRole.STUDENT:
            request.staff_status = Status.PENDING
        else:
            raise ValueError(f"Unknown requester role: {requester_role!r}")
        return request

    @hybrid_property
    def awaiting_staff(self):
        """Student request still waiting on the staff gate"""
        return self.requester_role == RequesterRole.STUDENT and self.staff_status == Status.PENDING

    @awaiting_staff.expression
    def awaiting_staff(cls):
        return and_(cls.requester_role == RequesterRole.STUDENT, cls.staff_status == Status.PENDING)

    @hybrid_property
    def awaiting_hod(self):
        """Request waiting on the HOD gate, for either track"""
        if self.hod_status != Status.PENDING:
            return False
        if self.requester_role == RequesterRole.STUDENT:
            return self.staff_status == Status.APPROVED
        return self.requester_role == RequesterRole.STAFF

    @awaiting_hod.expression
    def awaiting_hod(cls):
        return or_(
            and_(cls.requester_role == RequesterRole.STUDENT,
                 cls.staff_status == Status.APPROVED,
                 cls.hod_status == Status.PENDING),
            and_(cls.requester_role == RequesterRole.STAFF,
                 cls.hod_status == Status.PENDING),
        )

    @property
    def is_terminal(self):
        return self.final_status != Status.PENDING

    def to_dict(self):
        """Convert to dictionary"""
        return {
            'id': self.id,
            'requesterId': self.requester_id,
            'requesterRole': self.requester_role.value,
            'title': self.title,
            'description': self.description,
            'staffStatus': self.staff_status.value,
            'hodStatus': self.hod_status.value,
            'finalStatus': self.final_status.value,
            'createdAt': isoformat(self.created_at),
            'staffUpdatedAt': isoformat(self.staff_updated_at),
            'hodUpdatedAt': isoformat(self.hod_updated_at),
            'requester': self.requester.summary() if self.requester else None
        }

    def __repr__(self):
        return (f"<Request {self.id} {self.requester_role.value} "
                f"{self.staff_status.value}/{self.hod_status.value}/{self.final_status.value}>")
