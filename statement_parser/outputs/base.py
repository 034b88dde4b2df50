# statement_parser/outputs/base.py
from abc import ABC, abstractmethod


class BaseOutput(ABC):
    def __init__(self, config):
        self.config = config

    @abstractmethod
    def write(self, transactions):
        """Send transactions to the chosen sink."""
        pass
