import asyncio
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from starlette.concurrency import run_in_threadpool

from .errors import RenderFailure

logger = logging.getLogger("resume_service.renderer")


@dataclass(frozen=True)
class RenderedDocument:
    content: bytes
    media_type: str = "application/pdf"

    @property
    def length(self) -> int:
        return len(self.content)


class RenderSession:
    """
    One isolated use of the WeasyPrint engine.

    The document is parsed from an in-memory string. The resume template
    inlines all of its styles, so nothing is fetched over the network.
    """

    def __init__(self):
        self._engine = None
        self._document = None
        self.closed = False

    def open(self):
        # weasyprint needs pango/cairo at import time; a missing native
        # library surfaces here as an engine launch failure
        import weasyprint
        self._engine = weasyprint

    def load(self, html: str):
        if self._engine is None:
            raise RuntimeError("Render session is not open")
        self._document = self._engine.HTML(string=html).render()

    def to_pdf(self) -> bytes:
        if self._document is None:
            raise RuntimeError("No document loaded")
        return self._document.write_pdf()

    def close(self):
        self._document = None
        self._engine = None
        self.closed = True


class PdfRenderer:
    session_class = RenderSession

    def __init__(self, timeout: Optional[float] = 30.0):
        self.timeout = timeout

    @contextmanager
    def session(self) -> Iterator[RenderSession]:
        session = self.session_class()
        try:
            session.open()
            yield session
        finally:
            session.close()

    def render_sync(self, html: str) -> RenderedDocument:
        with self.session() as session:
            session.load(html)
            pdf = session.to_pdf()
        if not pdf:
            raise RenderFailure("Renderer produced an empty document.")
        return RenderedDocument(content=pdf)

    async def render(self, html: str) -> RenderedDocument:
        """Convert filled HTML to PDF off the event loop."""
        # On timeout only the wait is abandoned. The worker thread runs its one
        # document to completion and closes its session, holding a pool slot until then.
        try:
            document = await asyncio.wait_for(run_in_threadpool(self.render_sync, html), timeout=self.timeout)
        except RenderFailure:
            raise
        except asyncio.TimeoutError as e:
            logger.error(f"PDF rendering timed out after {self.timeout}s")
            raise RenderFailure("PDF rendering timed out.") from e
        except Exception as e:
            logger.error(f"Error generating PDF with WeasyPrint: {e}", exc_info=True)
            raise RenderFailure() from e
        logger.info(f"PDF generated ({document.length} bytes)")
        return document
