# Presupuestos de tiempo anidados (tabla -> columna) con cancelación cooperativa

import threading
import time
from typing import Optional

from core.domain.errors import BudgetExceededError


class Budget:
    """
    Ventana de tiempo con fecha límite monotónica.

    Un hijo nunca vence después que su padre y queda cancelado cuando el
    padre se cancela; cancelar al hijo no afecta al padre ni a sus hermanos.
    """

    def __init__(self, seconds: float, scope: str = "tabla", parent: Optional["Budget"] = None):
        self.seconds = seconds
        self.scope = scope
        self.parent = parent
        deadline = time.monotonic() + seconds
        if parent is not None:
            deadline = min(deadline, parent.deadline)
        self.deadline = deadline
        self._cancelled = threading.Event()

    def child(self, seconds: float, scope: str = "columna") -> "Budget":
        return Budget(seconds, scope=scope, parent=self)

    def cancel(self):
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        if self._cancelled.is_set():
            return True
        return self.parent is not None and self.parent.cancelled

    def remaining(self) -> float:
        if self.cancelled:
            return 0.0
        return max(0.0, self.deadline - time.monotonic())

    def expired(self) -> bool:
        return self.remaining() <= 0.0

    def check(self):
        """Lanza BudgetExceededError si el presupuesto venció o fue cancelado"""
        if self.cancelled:
            raise BudgetExceededError(self.scope, self.seconds, cancelled=True)
        if self.expired():
            raise BudgetExceededError(self.scope, self.seconds)
