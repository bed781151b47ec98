# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from dailytodo.application.services.password_hashing import ScryptPasswordHasher
from dailytodo.application.services.session_tokens import JwtSessionTokenService
from dailytodo.application.use_cases.plans.create_plan_item import CreatePlanItemUseCase
from dailytodo.application.use_cases.plans.delete_plan_item import DeletePlanItemUseCase
from dailytodo.application.use_cases.plans.list_plan_items import ListPlanItemsUseCase
from dailytodo.application.use_cases.plans.toggle_plan_item import TogglePlanItemUseCase
from dailytodo.application.use_cases.todos.create_todo import CreateTodoUseCase
from dailytodo.application.use_cases.todos.delete_todo import DeleteTodoUseCase
from dailytodo.application.use_cases.todos.get_todo import GetTodoUseCase
from dailytodo.application.use_cases.todos.list_todos import (
    ListTodosUseCase,
    TodoHistoryUseCase,
)
from dailytodo.application.use_cases.todos.toggle_todo import ToggleTodoUseCase
from dailytodo.application.use_cases.todos.update_todo import UpdateTodoUseCase
from dailytodo.application.use_cases.users.login_user import LoginUserUseCase
from dailytodo.application.use_cases.users.register_user import RegisterUserUseCase
from dailytodo.infrastructure.auth import SessionAuthenticator
from dailytodo.infrastructure.db.session import Database
from dailytodo.infrastructure.repositories.sqlalchemy import (
    SqlAlchemyPlanItemRepository,
    SqlAlchemyTodoRepository,
)
from dailytodo.infrastructure.repositories.users import SqlAlchemyUserRepository
from dailytodo.interfaces.http.controllers.auth_controller import AuthController
from dailytodo.interfaces.http.controllers.misc_controller import MiscController
from dailytodo.interfaces.http.controllers.plans_controller import PlansController
from dailytodo.interfaces.http.controllers.todos_controller import TodosController
from dailytodo.shared.config import AppConfig, load_config


class Container:
    """Wires one ``Database`` handle through repositories, use cases and controllers."""

    def __init__(self, config: AppConfig | None = None, *, database: Database | None = None) -> None:
        self.config = config or load_config()
        if database is not None:
            self.__dict__["database"] = database

    @cached_property
    def database(self) -> Database:
        return Database(self.config.database)

    @cached_property
    def password_hasher(self) -> ScryptPasswordHasher:
        return ScryptPasswordHasher()

    @cached_property
    def session_tokens(self) -> JwtSessionTokenService:
        return JwtSessionTokenService(self.config.jwt_secret)

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.database.session)

    @cached_property
    def todo_repository(self) -> SqlAlchemyTodoRepository:
        return SqlAlchemyTodoRepository(self.database.session)

    @cached_property
    def plan_repository(self) -> SqlAlchemyPlanItemRepository:
        return SqlAlchemyPlanItemRepository(self.database.session)

    @cached_property
    def authenticator(self) -> SessionAuthenticator:
        return SessionAuthenticator(users=self.user_repository, tokens=self.session_tokens)

    # Use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
            admin_username=self.config.admin_username,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            authenticator=self.authenticator,
        )

    @cached_property
    def todos_controller(self) -> TodosController:
        todos = self.todo_repository
        return TodosController(
            create_use_case=CreateTodoUseCase(todos=todos),
            list_use_case=ListTodosUseCase(todos=todos),
            history_use_case=TodoHistoryUseCase(todos=todos),
            get_use_case=GetTodoUseCase(todos=todos),
            update_use_case=UpdateTodoUseCase(todos=todos),
            toggle_use_case=ToggleTodoUseCase(todos=todos),
            delete_use_case=DeleteTodoUseCase(todos=todos),
        )

    @cached_property
    def plans_controller(self) -> PlansController:
        plans = self.plan_repository
        return PlansController(
            list_use_case=ListPlanItemsUseCase(plans=plans),
            create_use_case=CreatePlanItemUseCase(plans=plans),
            toggle_use_case=TogglePlanItemUseCase(plans=plans),
            delete_use_case=DeletePlanItemUseCase(plans=plans),
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)


__all__ = ["Container"]
