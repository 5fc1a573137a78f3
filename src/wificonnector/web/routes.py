"""
API routes for the WiFi Connector form.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from wificonnector.config import DEFAULT_CONFIG_PATH, load_config
from wificonnector.controller import ActionState, FormController
from wificonnector.devices import DEVICES
from wificonnector.form import CredentialForm, form_errors

logger = logging.getLogger(__name__)

router = APIRouter()

# Global controller for the single form this app serves
_controller: Optional[FormController] = None


def get_controller() -> FormController:
    """Get or create the global form controller."""
    global _controller
    if _controller is None:
        _controller = FormController.from_config(load_config(DEFAULT_CONFIG_PATH))
    return _controller


def set_controller(controller: Optional[FormController]) -> None:
    """Replace the global form controller (None resets it)."""
    global _controller
    _controller = controller


class FormState(BaseModel):
    """Current form state."""

    values: dict[str, str]
    errors: dict[str, str]
    password_visible: bool
    suggestion_state: str
    send_state: str


class FieldUpdate(BaseModel):
    """Partial form update; unset fields are left alone."""

    ssid: Optional[str] = None
    password: Optional[str] = None
    device: Optional[str] = None


class NotificationResponse(BaseModel):
    """Transient message for the UI."""

    title: str
    description: str
    variant: str


@router.get("/devices")
async def list_devices() -> list[str]:
    """List the devices credentials can be sent to."""
    return list(DEVICES)


@router.get("/form", response_model=FormState)
async def get_form() -> FormState:
    """Get the current form values, errors and action states."""
    return FormState(**get_controller().snapshot())


@router.put("/form", response_model=FormState)
async def update_form(update: FieldUpdate) -> FormState:
    """Update form fields and revalidate them."""
    controller = get_controller()
    for name, value in update.model_dump(exclude_none=True).items():
        controller.set_field(name, value)
    return FormState(**controller.snapshot())


@router.post("/form/password-visibility", response_model=FormState)
async def toggle_password_visibility() -> FormState:
    """Show or hide the password."""
    controller = get_controller()
    controller.toggle_password_visibility()
    return FormState(**controller.snapshot())


@router.post("/password/suggest", response_model=FormState)
async def suggest_password() -> FormState:
    """Fill the password field with a generated password.

    Failures are reported through the notification queue, not as an
    HTTP error.
    """
    controller = get_controller()
    if controller.suggestion_state == ActionState.PENDING:
        raise HTTPException(status_code=409, detail="Password suggestion already in progress")
    await controller.generate_password()
    return FormState(**controller.snapshot())


@router.post("/send", status_code=202)
async def send_credentials(values: Any = Body(default=None)) -> JSONResponse:
    """Validate the credentials and start a simulated send.

    The outcome arrives later through /api/notifications.
    """
    controller = get_controller()
    if not isinstance(values, dict):
        return JSONResponse(
            status_code=422,
            content={"errors": {}, "detail": "Expected a JSON object of form fields"},
        )
    try:
        form = CredentialForm.model_validate(values)
    except ValidationError as e:
        return JSONResponse(status_code=422, content={"errors": form_errors(e)})

    if controller.submit(form) is None:
        raise HTTPException(status_code=409, detail="Credentials are already being sent")

    logger.info("Started simulated send to %s", form.device)
    return JSONResponse(
        status_code=202,
        content={"status": "sending", "device": form.device},
    )


@router.get("/notifications", response_model=list[NotificationResponse])
async def get_notifications() -> list[NotificationResponse]:
    """Return and clear pending notifications."""
    return [
        NotificationResponse(**n.to_dict()) for n in get_controller().drain_notifications()
    ]
