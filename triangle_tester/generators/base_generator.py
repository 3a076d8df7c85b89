"""
Base Generator - Abstract base class for the test generation stages
"""
from abc import ABC, abstractmethod
from typing import Any, Dict
import logging


class BaseGenerator(ABC):
    """
    Abstract base class for generation stages.
    Provides common logging and the dictionary-driven interface.
    """

    def __init__(self, name: str, description: str = ""):
        """
        Initialize the generator.

        Args:
            name: Unique name for the stage
            description: Description of the stage's purpose
        """
        self.name = name
        self.description = description
        self.logger = logging.getLogger(f"triangle_tester.generator.{name}")

    @abstractmethod
    def execute(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """
        Run the stage on a context dictionary.

        Args:
            context: Dictionary containing the stage's inputs

        Returns:
            Dictionary containing the stage's outputs
        """

    def log_info(self, message: str):
        """Log an info message"""
        self.logger.info(f"[{self.name}] {message}")

    def log_error(self, message: str, exc_info: bool = False):
        """Log an error message, with the active traceback if exc_info"""
        self.logger.error(f"[{self.name}] {message}", exc_info=exc_info)

    def log_debug(self, message: str):
        """Log a debug message"""
        self.logger.debug(f"[{self.name}] {message}")

    def __repr__(self):
        return f"<{self.__class__.__name__}(name='{self.name}')>"
