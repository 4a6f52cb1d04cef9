"""User registration and lookup."""

from __future__ import annotations

import logging
import secrets
from typing import Iterable, Optional

from ..models import RegistrationResult, User
from ..storage import RecordStore, StoreError

log = logging.getLogger(__name__)

CODE_LENGTH = 10
CODE_ALPHABET = "abcdefghijklmnopqrstuvwxyz0123456789_-"

INTERNAL_ERROR = "Error interno del servidor"
NAME_REQUIRED = "Nombre es requerido"
DUPLICATE_NAME = "Ya existe un usuario con ese nombre"
SAVE_USER_FAILED = "Error al guardar el usuario"


def generate_code(taken: Iterable[str] = ()) -> str:
    """Return a short random public code not present in ``taken``."""

    used = set(taken)
    while True:
        code = "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_LENGTH))
        if code not in used:
            return code


def find_by_name(users: Iterable[User], name: str) -> Optional[User]:
    folded = name.casefold()
    return next((user for user in users if user.nombre.casefold() == folded), None)


def register_user(store: RecordStore, name: str) -> RegistrationResult:
    """Register a new user under a case-insensitively unique name."""

    name = (name or "").strip()
    if not name:
        return RegistrationResult(success=False, message=NAME_REQUIRED)

    try:
        snapshot = store.load()
    except StoreError:
        log.exception("Could not load store to register %r", name)
        return RegistrationResult(success=False, message=INTERNAL_ERROR)

    if find_by_name(snapshot.usuarios, name):
        return RegistrationResult(success=False, message=DUPLICATE_NAME)

    code = generate_code(user.codigo_usuario for user in snapshot.usuarios)
    snapshot.usuarios.append(User(nombre=name, codigo_usuario=code))

    if not store.save(snapshot):
        return RegistrationResult(success=False, message=SAVE_USER_FAILED)

    log.info("Registered user %r with code %s", name, code)
    return RegistrationResult(
        success=True,
        message=f"Usuario {name} registrado exitosamente",
        codigo_usuario=code,
    )


def get_user_by_code(store: RecordStore, code: str) -> Optional[User]:
    snapshot = store.load()
    return next((u for u in snapshot.usuarios if u.codigo_usuario == code), None)


__all__ = [
    "CODE_ALPHABET",
    "CODE_LENGTH",
    "DUPLICATE_NAME",
    "INTERNAL_ERROR",
    "NAME_REQUIRED",
    "SAVE_USER_FAILED",
    "find_by_name",
    "generate_code",
    "get_user_by_code",
    "register_user",
]
