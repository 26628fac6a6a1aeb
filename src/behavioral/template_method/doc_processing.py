"""
Template Method (Behavioral): document processing.

DocumentProcessor fixes the order read -> validate -> transform -> save.
Subclasses fill in `read` and `transform`; `validate` and `save` have
defaults that may be overridden.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class DocumentProcessor(ABC):
    """
    Skeleton of the processing workflow.

    Each step returns a short description; `process_document` collects them.
    """

    def process_document(self) -> List[str]:
        """
        Runs every step in order.

        :return: Step descriptions in execution order.
        """
        steps: List[str] = []
        for step in (self.read, self.validate, self.transform, self.save):
            message = step()
            logger.info("%s", message)
            steps.append(message)
        return steps

    @abstractmethod
    def read(self) -> str:
        raise NotImplementedError

    def validate(self) -> str:
        return "Validating document..."

    @abstractmethod
    def transform(self) -> str:
        raise NotImplementedError

    def save(self) -> str:
        return "Saving document..."


class PDFProcessor(DocumentProcessor):
    def read(self) -> str:
        return "Reading PDF document..."

    def transform(self) -> str:
        return "Transforming PDF content..."


class WordProcessor(DocumentProcessor):
    def read(self) -> str:
        return "Reading Word document..."

    def transform(self) -> str:
        return "Transforming Word content..."


class ExcelProcessor(DocumentProcessor):
    def read(self) -> str:
        return "Reading Excel document..."

    def transform(self) -> str:
        return "Transforming Excel content..."
