from abc import ABC, abstractmethod
import logging
from typing import List

import config


class OutOfRange(IndexError):
    position: int
    length: int

    def __init__(self, position: int, length: int):
        super().__init__(config.POSITION_ERROR_MESSAGE)
        self.position = position
        self.length = length


class ErrorReporter(ABC):
    @abstractmethod
    def report(self, error: OutOfRange):
        """
        :param error: The condition that aborted a navigation call. Reporting must not raise.
        """
        raise NotImplementedError()


class LoggingReporter(ErrorReporter):
    def report(self, error: OutOfRange):
        logging.error(str(error))
        logging.debug("rejected position %d for sequence of length %d" % (error.position, error.length))


class CollectingReporter(ErrorReporter):
    errors: List[OutOfRange]

    def __init__(self):
        self.errors = []

    def report(self, error: OutOfRange):
        self.errors.append(error)

    @property
    def messages(self) -> List[str]:
        return [str(error) for error in self.errors]

    def clear(self):
        self.errors.clear()
