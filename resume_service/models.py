from sqlalchemy import Column, String, DateTime, Integer, Text, ForeignKey
from sqlalchemy.orm import declarative_base, relationship
import datetime

Base = declarative_base()


class User(Base):
    __tablename__ = 'users'
    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)  # bcrypt hash, never serialized
    created_at = Column(DateTime, default=datetime.datetime.utcnow)

    personal_details = relationship("PersonalDetails", uselist=False, back_populates="user", cascade="all, delete-orphan")
    experiences = relationship("Experience", back_populates="user", cascade="all, delete-orphan", order_by="Experience.id")
    education = relationship("Education", back_populates="user", cascade="all, delete-orphan", order_by="Education.id")
    skills = relationship("Skill", back_populates="user", cascade="all, delete-orphan", order_by="Skill.id")
    projects = relationship("Project", back_populates="user", cascade="all, delete-orphan", order_by="Project.id")


class PersonalDetails(Base):
    __tablename__ = 'personal_details'
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete="CASCADE"), unique=True, nullable=False)
    full_name = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    linkedin_url = Column(String, nullable=True)
    portfolio_url = Column(String, nullable=True)

    user = relationship("User", back_populates="personal_details")


class Experience(Base):
    __tablename__ = 'experiences'
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete="CASCADE"), nullable=False, index=True)
    job_title = Column(String, nullable=False)
    company = Column(String, nullable=False)
    start_date = Column(String, nullable=True)
    end_date = Column(String, nullable=True)  # NULL means the role is ongoing
    description = Column(Text, nullable=True)

    user = relationship("User", back_populates="experiences")


class Education(Base):
    __tablename__ = 'education'
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete="CASCADE"), nullable=False, index=True)
    school = Column(String, nullable=False)
    degree = Column(String, nullable=False)
    end_date = Column(String, nullable=True)

    user = relationship("User", back_populates="education")


class Skill(Base):
    __tablename__ = 'skills'
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete="CASCADE"), nullable=False, index=True)
    skill_name = Column(String, nullable=False)
    category = Column(String, nullable=True)

    user = relationship("User", back_populates="skills")


class Project(Base):
    __tablename__ = 'projects'
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete="CASCADE"), nullable=False, index=True)
    project_name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    link = Column(String, nullable=True)

    user = relationship("User", back_populates="projects")
