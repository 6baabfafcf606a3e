from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
import logging

from ..assembler import ResumeAssembler
from ..auth import get_current_user
from ..database import get_db
from ..renderer import PdfRenderer
from ..repository import UserRepository
from ..schemas import CurrentUser

logger = logging.getLogger("resume_service.routers.resume")

router = APIRouter(prefix="/api/resume", tags=["resume"])


def get_assembler(request: Request, db: Session = Depends(get_db)) -> ResumeAssembler:
    return ResumeAssembler(UserRepository(db), page_size=request.app.state.settings.PAGE_SIZE)


def get_renderer(request: Request) -> PdfRenderer:
    return request.app.state.renderer


@router.get("")
def get_resume(
    user: CurrentUser = Depends(get_current_user),
    assembler: ResumeAssembler = Depends(get_assembler)
):
    """Return every resume section the user owns"""
    return {"message": "Resume data fetched!", "data": assembler.load(user.id)}


@router.get("/generate")
async def generate_resume_pdf(
    user: CurrentUser = Depends(get_current_user),
    assembler: ResumeAssembler = Depends(get_assembler),
    renderer: PdfRenderer = Depends(get_renderer)
):
    """Render the user's resume as an A4 PDF"""
    html = await run_in_threadpool(assembler.assemble, user.id)
    pdf = await renderer.render(html)
    logger.info(f"Sending resume PDF to user {user.id} ({pdf.length} bytes)")
    return Response(
        content=pdf.content,
        media_type=pdf.media_type,
        headers={
            "Content-Length": str(pdf.length),
            "Content-Disposition": 'attachment; filename="resume.pdf"',
        },
    )
