"""Post routes. Every route requires a bearer token."""

from __future__ import annotations

from flask import Blueprint, request

from postdesk.domain.unsettable import UNSET
from postdesk.domain.validation import POST_FIELDS
from postdesk.service_layer import commands, queries

from .context import auth_required, container, current_principal, json_body
from .resources import post_resource, post_summary_resource

posts_bp = Blueprint("posts", __name__, url_prefix="/posts")


@posts_bp.get("")
@auth_required
def index():
    search = request.args.get("search")
    summaries = queries.list_posts(container().uow(), current_principal(), search)
    return [post_summary_resource(s) for s in summaries]


@posts_bp.post("")
@auth_required
def store():
    body = json_body()
    post = container().message_bus().handle(
        commands.CreatePost(
            owner=current_principal(),
            title=body.get("title"),
            excerpt=body.get("excerpt"),
            content=body.get("content"),
            categories=body.get("categories"),
        )
    )
    return post_resource(post), 201


@posts_bp.get("/<int:post_id>")
@auth_required
def show(post_id: int):
    post = queries.get_post(container().uow(), current_principal(), post_id)
    return post_resource(post)


@posts_bp.route("/<int:post_id>", methods=["PUT", "PATCH"])
@auth_required
def update(post_id: int):
    body = json_body()
    changes = {field: body[field] for field in POST_FIELDS if field in body}
    post = container().message_bus().handle(
        commands.UpdatePost(
            requester=current_principal(),
            post_id=post_id,
            title=changes.get("title", UNSET),
            excerpt=changes.get("excerpt", UNSET),
            content=changes.get("content", UNSET),
            categories=changes.get("categories", UNSET),
        )
    )
    return post_resource(post)


@posts_bp.delete("/<int:post_id>")
@auth_required
def destroy(post_id: int):
    container().message_bus().handle(
        commands.DeletePost(requester=current_principal(), post_id=post_id)
    )
    return "", 204
