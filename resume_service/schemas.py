from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime


# Auth schemas
class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class CurrentUser(BaseModel):
    """Identity decoded from a verified access token."""
    id: int
    email: str


class UserOut(BaseModel):
    id: int
    email: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RegisterResponse(BaseModel):
    message: str
    user: UserOut


class TokenResponse(BaseModel):
    message: str
    token: str
    token_type: str = "bearer"


# Resume section schemas
class PersonalDetailsIn(BaseModel):
    full_name: Optional[str] = None
    phone: Optional[str] = None
    linkedin_url: Optional[str] = None
    portfolio_url: Optional[str] = None


class PersonalDetailsOut(PersonalDetailsIn):
    id: int

    class Config:
        from_attributes = True


class ExperienceCreate(BaseModel):
    job_title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    description: Optional[str] = None


class ExperienceOut(ExperienceCreate):
    id: int

    class Config:
        from_attributes = True


class EducationCreate(BaseModel):
    school: str = Field(..., min_length=1)
    degree: str = Field(..., min_length=1)
    end_date: Optional[str] = None


class EducationOut(EducationCreate):
    id: int

    class Config:
        from_attributes = True


class SkillCreate(BaseModel):
    skill_name: str = Field(..., min_length=1)
    category: Optional[str] = None


class SkillOut(SkillCreate):
    id: int

    class Config:
        from_attributes = True


class ProjectCreate(BaseModel):
    project_name: str = Field(..., min_length=1)
    description: Optional[str] = None
    link: Optional[str] = None


class ProjectOut(ProjectCreate):
    id: int

    class Config:
        from_attributes = True


class ResumeOut(BaseModel):
    """A user's complete resume. Deliberately has no password_hash field."""
    id: int
    email: str
    personal_details: Optional[PersonalDetailsOut] = None
    experiences: List[ExperienceOut] = []
    education: List[EducationOut] = []
    skills: List[SkillOut] = []
    projects: List[ProjectOut] = []

    class Config:
        from_attributes = True


class MessageResponse(BaseModel):
    message: str
