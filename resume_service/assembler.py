"""
Builds the HTML resume for one user from their stored records.

The user row is converted to ``ResumeOut`` before anything else touches it.
That schema has no password_hash field, so the hash cannot reach the
template or any response.
"""
import logging
import jinja2

from .errors import DataIntegrity
from .repository import UserRepository
from .schemas import ResumeOut

logger = logging.getLogger("resume_service.assembler")

DEFAULT_TEMPLATE = "resume.html"

# Shown in place of personal details the user has not filled in
SCALAR_DEFAULTS = {
    "full_name": "Your Name",
    "phone": "Your Phone",
    "linkedin_url": "Your LinkedIn",
    "portfolio_url": "Your Portfolio",
}


def _finalize(value):
    # Missing optional fields render as nothing, never as "None"
    return "" if value is None else value


template_env = jinja2.Environment(
    loader=jinja2.PackageLoader("resume_service", "templates"),
    autoescape=jinja2.select_autoescape(["html"]),
    undefined=jinja2.StrictUndefined,
    finalize=_finalize,
    trim_blocks=True,
    lstrip_blocks=True,
)


class ResumeAssembler:
    def __init__(self, users: UserRepository, page_size: str = "A4", template_name: str = DEFAULT_TEMPLATE):
        self.users = users
        self.page_size = page_size
        self.template_name = template_name

    def load(self, user_id: int) -> ResumeOut:
        """Fetch the user and every owned section in one read."""
        user = self.users.get_with_resume(user_id)
        if user is None:
            logger.error(f"Authenticated user {user_id} has no user record")
            raise DataIntegrity("Authenticated user does not exist.")
        return ResumeOut.model_validate(user)

    def build_context(self, resume: ResumeOut) -> dict:
        details = resume.personal_details
        context = {
            field: (getattr(details, field, None) if details else None) or default
            for field, default in SCALAR_DEFAULTS.items()
        }
        context.update(
            email=resume.email,
            page_size=self.page_size,
            experiences=resume.experiences,
            projects=resume.projects,
            education=resume.education,
            skills=resume.skills,
        )
        return context

    def fill(self, resume: ResumeOut) -> str:
        template = template_env.get_template(self.template_name)
        try:
            return template.render(**self.build_context(resume))
        except jinja2.UndefinedError as e:
            logger.error(f"Template {self.template_name} references an unknown placeholder: {e}")
            raise DataIntegrity("Resume template could not be filled.") from e

    def assemble(self, user_id: int) -> str:
        resume = self.load(user_id)
        html = self.fill(resume)
        logger.info(
            f"Assembled resume for user {user_id}: {len(resume.experiences)} experiences, "
            f"{len(resume.education)} education, {len(resume.skills)} skills, {len(resume.projects)} projects"
        )
        return html
