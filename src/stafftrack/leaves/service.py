from __future__ import annotations

import logging
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Optional, Union

from ..common.datetime_utils import now_local, today_local
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_LIST_LIMIT, MIN_LEAVE_NOTICE_DAYS
from ..core.enums import LeaveStatus, Role
from ..core.exceptions import ConflictError, NotFoundError, PersistenceError, ValidationError
from ..core.permissions import Action, require
from ..employees.repository import EmployeeRepository
from .model import LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)

DECISIONS = frozenset({LeaveStatus.APPROVED, LeaveStatus.REJECTED})


def earliest_start_date(today: date) -> date:
    """First start date a request submitted on ``today`` may use."""
    return today + timedelta(days=MIN_LEAVE_NOTICE_DAYS)


def _as_decision(decision: Union[LeaveStatus, str]) -> LeaveStatus:
    if isinstance(decision, str):
        decision = decision.strip().lower()
    try:
        status = LeaveStatus(decision)
    except ValueError:
        raise ValidationError("Decision must be 'approved' or 'rejected'")
    if status not in DECISIONS:
        raise ValidationError("Decision must be 'approved' or 'rejected'")
    return status


class LeaveService:
    """Leave request workflow: submission and role-gated decision.

    Errors propagate to the caller as raised; nothing here retries.
    """

    def __init__(self, leaves: LeaveRepository, employees: EmployeeRepository):
        self._leaves = leaves
        self._employees = employees

    def submit(
        self,
        *,
        actor_user_id: int,
        start_date: date,
        end_date: date,
        reason: str,
        today: Optional[date] = None,
    ) -> LeaveRequest:
        today = today or today_local()

        if start_date < earliest_start_date(today):
            logger.warning(
                "Leave rejected for user %s: start %s is less than %d days after %s",
                actor_user_id, start_date, MIN_LEAVE_NOTICE_DAYS, today,
            )
            raise ValidationError("Leave requests must be submitted at least one week in advance")
        if end_date < start_date:
            raise ValidationError("End date must be on or after the start date")
        reason = require_non_empty(reason, "Reason")

        employee = self._employees.get_by_user_id(int(actor_user_id))
        if not employee:
            raise NotFoundError("Employee record not found")

        request_id = self._leaves.create(
            employee_id=employee.employee_id,
            start_date=start_date,
            end_date=end_date,
            reason=reason,
        )
        created = self._leaves.get(request_id=request_id)
        if not created:
            raise PersistenceError("Leave request was not stored")

        logger.info(
            "Leave request %s submitted by employee %s (%s..%s)",
            request_id, employee.employee_id, start_date, end_date,
        )
        return created

    def decide(
        self,
        *,
        request_id: int,
        decision: Union[LeaveStatus, str],
        actor_user_id: int,
        actor_role: Union[Role, str, None],
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        require(actor_role, Action.DECIDE_LEAVE)
        status = _as_decision(decision)

        req = self._leaves.get(request_id=int(request_id))
        if not req:
            raise NotFoundError("Leave request not found")
        if req.is_decided:
            return self._resolve_decided(req, status)

        applied = self._leaves.decide(
            request_id=req.request_id,
            status=status,
            approved_by=int(actor_user_id),
            approved_at=now or now_local(),
        )
        current = self._leaves.get(request_id=req.request_id)
        if not current:
            raise NotFoundError("Leave request not found")
        if not applied:
            # another decision landed between the read and the guarded update
            return self._resolve_decided(current, status)

        logger.info("Leave request %s %s by user %s", req.request_id, status.value, actor_user_id)
        return current

    @staticmethod
    def _resolve_decided(req: LeaveRequest, status: LeaveStatus) -> LeaveRequest:
        if req.status == status:
            return req
        logger.warning(
            "Leave request %s is already %s, refusing to mark it %s",
            req.request_id, req.status.value, status.value,
        )
        raise ConflictError(f"Leave request has already been {req.status.value}")

    def list_requests(self, *, status: Optional[LeaveStatus] = None) -> list[dict]:
        return list(self._leaves.list_requests(status=status, limit=DEFAULT_LIST_LIMIT))

    def list_for_user(self, *, user_id: int) -> list[dict]:
        employee = self._employees.get_by_user_id(int(user_id))
        if not employee:
            return []
        return list(self._leaves.list_requests(employee_id=employee.employee_id, limit=DEFAULT_LIST_LIMIT))

    def count_by_status(self) -> dict[str, int]:
        counts = Counter(s.value for s in self._leaves.list_statuses())
        return {s.value: counts.get(s.value, 0) for s in LeaveStatus}
