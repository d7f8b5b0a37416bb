"""First-in, first-out queue of customers waiting to be served."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator


class EmptyQueueError(Exception):
    """Raised when serving a customer from an empty queue."""

    def __init__(self) -> None:
        super().__init__("Fila vazia. Nenhum cliente para atender.")


@dataclass(frozen=True)
class Customer:
    """A customer in line, identified by account number and agency."""

    account: int
    agency: int


class ServiceQueue:
    """Customers in arrival order."""

    def __init__(self) -> None:
        self._customers: deque[Customer] = deque()

    def enqueue(self, account: int, agency: int) -> Customer:
        customer = Customer(account, agency)
        self._customers.append(customer)
        return customer

    def dequeue(self) -> Customer:
        """Remove and return the customer at the front of the line."""
        if not self._customers:
            raise EmptyQueueError()
        return self._customers.popleft()

    def render(self) -> str:
        """Return the listing of the queue as shown to the operator."""
        if not self._customers:
            return "Fila está vazia.\n"
        lines = ["Clientes na fila:"]
        lines.extend(f"Conta {c.account} | Agência {c.agency}" for c in self._customers)
        return "\n".join(lines) + "\n"

    def __iter__(self) -> Iterator[Customer]:
        return iter(list(self._customers))

    def __len__(self) -> int:
        return len(self._customers)