from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from ..validators import invalid, optional_text


def _password(value: Any) -> Optional[str]:
    # пароль не обрезаем: пробелы по краям - часть пароля
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


def _email(value: Any) -> Optional[str]:
    text = optional_text(value)
    return text.lower() if text else None


Text = Annotated[Optional[str], BeforeValidator(optional_text)]
Email = Annotated[Optional[str], BeforeValidator(_email)]
Password = Annotated[Optional[str], BeforeValidator(_password)]


class RegisterRequest(BaseModel):
    name: Text = None
    email: Email = None
    number: Text = None
    password: Password = None
    branch: Text = None
    roll_number: Text = Field(None, alias="rollNumber")

    @model_validator(mode="after")
    def check_required(self):
        if not (self.name and self.email and self.number and self.password):
            raise invalid("name, email, number, password required")
        return self


class LoginRequest(BaseModel):
    email: Email = None
    password: Password = None

    @model_validator(mode="after")
    def check_required(self):
        if not (self.email and self.password):
            raise invalid("email and password required")
        return self


class StudentRead(BaseModel):
    id: int
    name: str
    email: str
    number: str
    branch: Optional[str] = None
    roll_number: Optional[str] = Field(None, serialization_alias="rollNumber")
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    token: str
    student: StudentRead
