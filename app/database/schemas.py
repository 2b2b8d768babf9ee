"""
Data models for the JSON document store

- Pydantic provides validation at the API boundary
- Python attributes are snake_case, JSON keys are camelCase (startDate, daysLeft, fileName)
- Optional fields for flexibility; absent values default to the stored shape
"""
from typing import Optional, List, Literal
from datetime import date
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator, model_serializer
from pydantic.alias_generators import to_camel


TicketStatus = Literal["open", "closed"]
Sender = Literal["client", "admin"]


class CamelModel(BaseModel):
    """
    Base model reading and writing camelCase keys
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------- Stored entities ----------

class AdminCredential(CamelModel):
    username: str = Field(..., description="Admin username")
    password: str = Field(..., description="Admin password (plaintext)")


class Client(CamelModel):
    """
    Training client

    days_left is derived on every read from start_date + duration
    """
    id: str                      = Field(...,  description="Client unique identifier")
    name: str                    = Field(...,  description="Client full name")
    email: str                   = Field(...,  description="Client email address")
    start_date: Optional[date]   = Field(None, description="Membership start date (format: YYYY-MM-DD)")
    active: bool                 = Field(True, description="Whether the membership is active")
    duration: Optional[int]      = Field(None, description="Membership length in months")
    days_left: Optional[int]     = Field(None, description="Remaining membership days (derived)")


class Program(CamelModel):
    id: str                      = Field(...,  description="Program unique identifier")
    title: str                   = Field(...,  description="Program title")
    description: str             = Field("",   description="Program description")
    image: Optional[str]         = Field(None, description="Image reference")


class Recipe(CamelModel):
    id: str                      = Field(...,  description="Recipe unique identifier")
    title: str                   = Field(...,  description="Recipe title")
    ingredients: str             = Field("",   description="Ingredient list")
    instructions: str            = Field("",   description="Preparation steps")
    image: Optional[str]         = Field(None, description="Image reference")


class Message(CamelModel):
    """
    Single entry in a ticket thread

    text and attachment are both optional; unset values are left out of the JSON
    """
    sender: Sender               = Field("client", description="Who wrote the message")
    text: Optional[str]          = Field(None, description="Message text")
    attachment: Optional[str]    = Field(None, description="Relative URL of the uploaded file (/uploads/...)")
    time: str                    = Field(...,  description="ISO-8601 timestamp when the message was added")

    @model_serializer(mode="wrap")
    def drop_empty_fields(self, handler):
        data = handler(self)
        return {key: value for key, value in data.items() if value is not None}


class Ticket(CamelModel):
    """
    Support ticket with its message thread

    password is a shared secret for client-side lookup, not a security boundary
    """
    id: str                      = Field(...,  description="Ticket unique identifier")
    email: str                   = Field(...,  description="Email of the client who opened the ticket")
    password: str                = Field(...,  description="Lookup password chosen by the client")
    created: str                 = Field(...,  description="ISO-8601 timestamp when the ticket was created")
    status: TicketStatus         = Field("open", description="Ticket status")
    messages: List[Message]      = Field(default_factory=list, description="Ordered message thread")


class Document(CamelModel):
    """
    Root JSON document holding every collection
    """
    admin: AdminCredential       = Field(..., description="Admin credential")
    clients: List[Client]        = Field(default_factory=list)
    programs: List[Program]      = Field(default_factory=list)
    tickets: List[Ticket]        = Field(default_factory=list)
    recipes: List[Recipe]        = Field(default_factory=list)


# ---------- Request bodies ----------

class LoginRequest(CamelModel):
    username: Optional[str] = None
    password: Optional[str] = None


class ClientCreate(CamelModel):
    name: Optional[str]          = Field(None, description="Client full name (required)")
    email: Optional[str]         = Field(None, description="Client email address (required)")
    start_date: Optional[date]   = Field(None, description="Start date, defaults to today")
    active: Optional[bool]       = Field(None, description="Active unless explicitly false")
    duration: Optional[int]      = Field(None, description="Membership length in months")

    @model_validator(mode="after")
    def require_name_and_email(self):
        if not self.name or not self.email:
            raise ValueError("name and email required")
        return self

    @field_validator("start_date", mode="before")
    @classmethod
    def empty_start_date(cls, value):
        return value or None


class ProgramCreate(CamelModel):
    title: Optional[str]         = Field(None, description="Program title (required)")
    description: Optional[str]   = None
    image: Optional[str]         = None

    @model_validator(mode="after")
    def require_title(self):
        if not self.title:
            raise ValueError("title required")
        return self


class RecipeCreate(CamelModel):
    title: Optional[str]         = Field(None, description="Recipe title (required)")
    ingredients: Optional[str]   = None
    instructions: Optional[str]  = None
    image: Optional[str]         = None

    @model_validator(mode="after")
    def require_title(self):
        if not self.title:
            raise ValueError("title required")
        return self


class RecipeUpdate(CamelModel):
    """
    Partial recipe update (only fields present in the body are applied)
    """
    title: Optional[str]         = None
    ingredients: Optional[str]   = None
    instructions: Optional[str]  = None
    image: Optional[str]         = None


class TicketCreate(CamelModel):
    email: Optional[str]         = Field(None, description="Client email (required)")
    password: Optional[str]      = Field(None, description="Lookup password (required)")
    message: Optional[str]       = Field(None, description="Initial message text")
    file: Optional[str]          = Field(None, description="Base64 attachment, optionally a data URI")
    file_name: Optional[str]     = Field(None, description="Original attachment filename")

    @model_validator(mode="after")
    def require_credentials(self):
        if not self.email or not self.password:
            raise ValueError("email and password required")
        return self


class MessageCreate(CamelModel):
    sender: Optional[Sender]     = Field(None, description="Defaults to client")
    text: Optional[str]          = None
    file: Optional[str]          = Field(None, description="Base64 attachment, optionally a data URI")
    file_name: Optional[str]     = None

    @model_validator(mode="after")
    def require_text_or_file(self):
        if not self.text and not self.file:
            raise ValueError("text or file required")
        return self


class TicketUpdate(CamelModel):
    status: Optional[TicketStatus] = Field(None, description="New ticket status")


# ---------- Responses ----------

class CreatedResponse(BaseModel):
    id: str


class SuccessResponse(BaseModel):
    success: bool
