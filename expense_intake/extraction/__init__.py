from expense_intake.extraction.client import AIExtractionClient
from expense_intake.extraction.factory import ExtractionClientFactory
from expense_intake.extraction.models import ExtractionDraft

__all__ = ["AIExtractionClient", "ExtractionClientFactory", "ExtractionDraft"]

