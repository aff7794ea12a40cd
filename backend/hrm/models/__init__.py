from hrm.models.employee import Employee

__all__ = [
    "Employee",
]
