import logging
from collections import namedtuple

logger = logging.getLogger(__name__)

Toast = namedtuple('Toast', ['level', 'message'])


class Notifier:
    """User-visible notifications."""

    def success(self, message):
        raise NotImplementedError

    def error(self, message):
        raise NotImplementedError


class ToastLog(Notifier):
    """Keeps every toast in memory and logs it."""

    def __init__(self):
        self.toasts = []

    def success(self, message):
        logger.info('%s', message)
        self.toasts.append(Toast('success', message))

    def error(self, message):
        logger.warning('%s', message)
        self.toasts.append(Toast('error', message))

    @property
    def errors(self):
        return [toast.message for toast in self.toasts if toast.level == 'error']

    @property
    def last(self):
        return self.toasts[-1] if self.toasts else None
