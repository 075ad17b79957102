"""Registration, login and logout routes."""

from __future__ import annotations

from flask import Blueprint, g

from postdesk.service_layer import commands

from .context import auth_required, container, json_body
from .resources import user_resource

identity_bp = Blueprint("identity", __name__)


@identity_bp.post("/register")
def register():
    body = json_body()
    container().message_bus().handle(
        commands.RegisterUser(
            name=body.get("name"),
            email=body.get("email"),
            password=body.get("password"),
        )
    )
    issued = container().message_bus().handle(
        commands.IssueToken(email=body.get("email"), password=body.get("password"))
    )
    return {"user": user_resource(issued.principal), "token": issued.plain_text}, 201


@identity_bp.post("/login")
def login():
    body = json_body()
    issued = container().message_bus().handle(
        commands.IssueToken(email=body.get("email"), password=body.get("password"))
    )
    return {"user": user_resource(issued.principal), "token": issued.plain_text}


@identity_bp.post("/logout")
@auth_required
def logout():
    container().message_bus().handle(commands.RevokeToken(token=g.token))
    return "", 204
