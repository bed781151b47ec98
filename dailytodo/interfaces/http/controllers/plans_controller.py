# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from dailytodo.application.use_cases.plans.create_plan_item import CreatePlanItemUseCase
from dailytodo.application.use_cases.plans.delete_plan_item import DeletePlanItemUseCase
from dailytodo.application.use_cases.plans.list_plan_items import ListPlanItemsUseCase
from dailytodo.application.use_cases.plans.toggle_plan_item import TogglePlanItemUseCase
from dailytodo.domain.plans.entities import PlanItem
from dailytodo.infrastructure.auth import auth_required, current_user
from dailytodo.interfaces.http.dto.common import SuccessDTO
from dailytodo.interfaces.http.dto.plans import (
    CreatePlanItemRequestDTO,
    ListPlanItemsQueryDTO,
    PlanItemDTO,
)
from dailytodo.shared.errors.validation import raise_validation_error


def _serialize(item: PlanItem) -> dict:
    return PlanItemDTO.model_validate(item).to_json()


class PlansController:
    def __init__(
        self,
        *,
        list_use_case: ListPlanItemsUseCase,
        create_use_case: CreatePlanItemUseCase,
        toggle_use_case: TogglePlanItemUseCase,
        delete_use_case: DeletePlanItemUseCase,
    ) -> None:
        self._list = list_use_case
        self._create = create_use_case
        self._toggle = toggle_use_case
        self._delete = delete_use_case

    @auth_required
    def list(self) -> tuple[Response, int]:
        try:
            query = ListPlanItemsQueryDTO.model_validate(request.args.to_dict())
        except ValidationError as exc:
            raise_validation_error(exc)
        items = self._list.execute(current_user().id, query.type, query.anchor)
        return jsonify([_serialize(item) for item in items]), 200

    @auth_required
    def create(self) -> tuple[Response, int]:
        try:
            dto = CreatePlanItemRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)
        item = self._create.execute(
            current_user().id, dto.type, dto.title, dto.description, dto.anchor
        )
        return jsonify(_serialize(item)), 201

    @auth_required
    def toggle(self, item_id: int) -> tuple[Response, int]:
        return jsonify(_serialize(self._toggle.execute(current_user().id, item_id))), 200

    @auth_required
    def delete(self, item_id: int) -> tuple[Response, int]:
        self._delete.execute(current_user().id, item_id)
        return jsonify(SuccessDTO().model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("plans", __name__, url_prefix="/api/plans")
        bp.add_url_rule("", view_func=self.list, methods=["GET"])
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<int:item_id>/toggle", view_func=self.toggle, methods=["POST"])
        bp.add_url_rule("/<int:item_id>", view_func=self.delete, methods=["DELETE"])
        return bp
