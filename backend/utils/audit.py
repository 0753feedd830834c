import logging

audit_logger = logging.getLogger("audit")

def write_log(*, user_id, action, resource, status="SUCCESS", ip=None, meta=None):
    level = logging.INFO if status == "SUCCESS" else logging.WARNING
    audit_logger.log(
        level,
        f"{action} {resource} {status}",
        extra={
            "user_id": str(user_id) if user_id else None,
            "action": action,
            "resource": resource,
            "status": status,
            "ip": ip,
            "meta": meta or {},
        },
    )
