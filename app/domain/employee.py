"""Domain model for employees."""
from typing import Optional
from pydantic import BaseModel, StrictInt, StrictStr


DEFAULT_GREETING = "Hello"


class Employee(BaseModel):
    """Employee with a name and an optional salary.

    Instances are frozen: neither field can change after construction.

    Attributes:
        name: Employee name, stored verbatim (empty strings allowed)
        salary: Salary amount, or None when no salary is recorded
    """
    name: StrictStr
    salary: Optional[StrictInt] = None

    class Config:
        frozen = True
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "name": "Ada",
                "salary": 5000
            }
        }

    def __init__(self, name: str, salary: Optional[int] = None):
        super().__init__(name=name, salary=salary)

    def get_name(self) -> str:
        """Return the employee name."""
        return self.name

    def get_salary(self) -> Optional[int]:
        """Return the salary, or None if absent."""
        return self.salary

    def greet_employee(self, greeting: Optional[str] = None) -> str:
        """Build a greeting addressed to this employee.

        Only an absent greeting (None) falls back to DEFAULT_GREETING; an
        empty string is used as-is.

        Args:
            greeting: Greeting word, or None for the default

        Returns:
            Greeting and name separated by a single space

        Examples:
            >>> Employee("Ada", 5000).greet_employee()
            'Hello Ada'
            >>> Employee("Grace").greet_employee("Welcome")
            'Welcome Grace'
        """
        if greeting is None:
            greeting = DEFAULT_GREETING

        return f"{greeting} {self.name}"
