"""Tipo resultado (unión etiquetada) para el borde público.

Reglas de diseño:
- Exactamente dos variantes: `Success` (valor) y `Failure` (`CodecError`).
- El aviso no bloqueante viaja junto al resultado (`warning`), nunca como
  estado mutable del servicio.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, NoReturn, TypeVar, Union

from core.domain.errors import CodecError, DigipinError, ErrorKind

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def with_warning(self, warning: str | None) -> "Success[T]":
        return replace(self, warning=warning)


@dataclass(frozen=True)
class Failure:
    error: CodecError
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self) -> NoReturn:
        raise DigipinError(self.error)

    def with_warning(self, warning: str | None) -> "Failure":
        return replace(self, warning=warning)


Result = Union[Success[T], Failure]


def failure(kind: ErrorKind, message: str, *, warning: str | None = None) -> Failure:
    return Failure(CodecError(kind=kind, message=message), warning=warning)


def guarded(kind: ErrorKind, action: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Convierte cualquier excepción inesperada en `Failure(kind)`.

    Se aplica en cada punto de entrada público: el mensaje conserva la causa
    (`"Failed to <action>: <exc>"`) y la traza queda en el log.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                logger.exception("Unexpected fault in %s", func.__qualname__)
                return failure(kind, f"Failed to {action}: {exc}")

        return wrapper

    return decorator
