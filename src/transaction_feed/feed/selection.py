"""Employee filter state: everyone, or exactly one employee."""

from dataclasses import dataclass

from transaction_feed.models.transaction import ALL_EMPLOYEES, Employee


@dataclass(frozen=True, slots=True)
class Selection:
    """
    Active employee filter.

    Attributes:
        employee_id: Selected employee, None for all employees.
    """

    employee_id: str | None = None

    @property
    def is_all(self) -> bool:
        return self.employee_id is None

    @classmethod
    def for_employee(cls, employee: Employee | None) -> "Selection":
        """Map a filter choice to a Selection; None and ALL_EMPLOYEES mean everyone."""
        if employee is None or employee == ALL_EMPLOYEES or not employee.id:
            return ALL
        return cls(employee_id=employee.id)

    def __str__(self) -> str:
        return "ALL" if self.is_all else f"BY_EMPLOYEE({self.employee_id})"


ALL = Selection()
