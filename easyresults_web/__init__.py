"""
EasyResults Web: turn operation outcomes into FastAPI responses.

Package root. The layout follows a hexagonal (ports & adapters) split:

Layers:
    - domain: Outcome value, status classifier, result dispatcher, ports, errors.
    - application: Composite registration helpers ("web defaults").
    - infrastructure: FastAPI/Starlette adapter implementing the responder port.
    - interfaces: Pydantic schemas and dispatcher dependencies.
    - shared: Cross-cutting concerns (errors, logging).
"""

from easyresults_web.domain.results.dispatcher import ResultDispatcher
from easyresults_web.domain.results.entities import Outcome, Status, StatusCategory

__all__ = ["Outcome", "ResultDispatcher", "Status", "StatusCategory"]
