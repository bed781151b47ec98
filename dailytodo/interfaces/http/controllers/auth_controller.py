# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from dailytodo.application.use_cases.users.login_user import LoginUserUseCase
from dailytodo.application.use_cases.users.register_user import RegisterUserUseCase
from dailytodo.infrastructure.auth import SessionAuthenticator
from dailytodo.interfaces.http.cookies import clear_session_cookie, set_session_cookie
from dailytodo.interfaces.http.dto.auth import LoginRequestDTO, RegisterRequestDTO, UserDTO
from dailytodo.interfaces.http.dto.common import SuccessDTO
from dailytodo.shared.errors.validation import raise_validation_error
from dailytodo.shared.logging import logger
from dailytodo.shared.middleware.rate_limit import rate_limit


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        authenticator: SessionAuthenticator,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._authenticator = authenticator

    def me(self) -> tuple[Response, int]:
        user = self._authenticator.try_authenticate(request)
        if user is None:
            return jsonify(None), 200
        return jsonify(UserDTO.model_validate(user).to_json()), 200

    @rate_limit()
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._register_use_case.execute(dto.username, dto.password, dto.name)

        response = jsonify(UserDTO.model_validate(user).to_json())
        set_session_cookie(response, request, token)
        logger.info(f"auth.register: ok user_id={user.id}")
        return response, 201

    @rate_limit()
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.username, dto.password, _get_client_ip())

        response = jsonify(UserDTO.model_validate(user).to_json())
        set_session_cookie(response, request, token)
        logger.info(f"auth.login: ok user_id={user.id}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        # tokens are stateless; dropping the cookie is the whole logout
        response = jsonify(SuccessDTO().model_dump())
        clear_session_cookie(response, request)
        logger.info("auth.logout: ok")
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api/auth")
        bp.add_url_rule("/me", view_func=self.me, methods=["GET"])
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        return bp
