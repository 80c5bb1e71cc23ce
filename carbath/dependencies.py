# carbath/dependencies.py
# Зависимости FastAPI: всё берётся из app.state, создаётся в create_app()

from fastapi import Request

from .config import Settings
from .services.notifications import SmtpMailer
from .services.slots import SlotRegistry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_slot_registry(request: Request) -> SlotRegistry:
    return request.app.state.slot_registry


def get_mailer(request: Request) -> SmtpMailer:
    return request.app.state.mailer
