from __future__ import annotations

from flask import Flask, request

from ..common.web import (
    current_role,
    current_user_id,
    login_required,
    ok,
    parse_date_arg,
    permission_required,
    request_payload,
)
from ..core.enums import LeaveStatus
from ..core.exceptions import ValidationError
from ..core.permissions import Action, can
from ..container import Container


def _leave_payload(req) -> dict:
    return {
        "request_id": req.request_id,
        "employee_id": req.employee_id,
        "start_date": req.start_date.strftime("%Y-%m-%d"),
        "end_date": req.end_date.strftime("%Y-%m-%d"),
        "reason": req.reason,
        "status": req.status.value,
        "approved_by": req.approved_by,
        "approved_at": req.approved_at.strftime("%Y-%m-%d %H:%M") if req.approved_at else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/leave-requests", methods=["GET"], endpoint="leave_requests")
    @login_required
    def leave_requests():
        raw_status = (request.args.get("status") or "").strip()
        try:
            status = LeaveStatus(raw_status) if raw_status else None
        except ValueError:
            raise ValidationError("Unknown status filter")

        can_decide = can(current_role(), Action.DECIDE_LEAVE)
        if can_decide:
            rows = container.leave_service.list_requests(status=status)
        else:
            rows = container.leave_service.list_for_user(user_id=current_user_id())
            if status is not None:
                rows = [r for r in rows if r["status"] == status.value]

        message = "" if rows else "No leave requests found"
        return ok({"leave_requests": rows, "can_decide": can_decide}, message=message)

    @app.route("/leave-requests", methods=["POST"], endpoint="new_leave")
    @permission_required(Action.SUBMIT_LEAVE)
    def new_leave():
        data = request_payload()
        start_date = parse_date_arg(data.get("start_date"), "Start date")
        end_date = parse_date_arg(data.get("end_date"), "End date")

        created = container.leave_service.submit(
            actor_user_id=current_user_id(),
            start_date=start_date,
            end_date=end_date,
            reason=data.get("reason", ""),
        )
        return ok(
            {"leave_request": _leave_payload(created)},
            message="Leave request submitted successfully",
            status=201,
        )

    def _decide(request_id: int, decision):
        updated = container.leave_service.decide(
            request_id=int(request_id),
            decision=decision,
            actor_user_id=current_user_id(),
            actor_role=current_role(),
        )
        return ok({"leave_request": _leave_payload(updated)}, message="Leave request updated")

    @app.route("/leave-requests/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @permission_required(Action.DECIDE_LEAVE)
    def approve_leave(request_id: int):
        return _decide(request_id, LeaveStatus.APPROVED.value)

    @app.route("/leave-requests/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @permission_required(Action.DECIDE_LEAVE)
    def reject_leave(request_id: int):
        return _decide(request_id, LeaveStatus.REJECTED.value)

    @app.route("/leave-requests/<int:request_id>/decision", methods=["POST"], endpoint="decide_leave")
    @login_required
    def decide_leave(request_id: int):
        return _decide(request_id, request_payload().get("decision"))
