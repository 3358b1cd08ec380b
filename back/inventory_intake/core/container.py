# inventory_intake/core/container.py

from dependency_injector import containers, providers

from inventory_intake.services.category import CategoryValidator
from inventory_intake.services.login import LoginValidator, RefreshTokenValidator
from inventory_intake.services.movement import MovementEvaluator
from inventory_intake.services.product import ProductValidator
from inventory_intake.services.role import RoleValidator
from inventory_intake.services.user import UserValidator


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        packages=["inventory_intake.api"]
    )

    # validators hold no state, one instance each is enough
    category_validator = providers.Singleton(CategoryValidator)
    product_validator = providers.Singleton(ProductValidator)
    role_validator = providers.Singleton(RoleValidator)
    user_validator = providers.Singleton(UserValidator)
    login_validator = providers.Singleton(LoginValidator)
    refresh_validator = providers.Singleton(RefreshTokenValidator)
    movement_evaluator = providers.Singleton(MovementEvaluator)
