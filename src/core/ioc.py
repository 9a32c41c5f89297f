import typing as t
from functools import lru_cache

import punq

from cart.domain.interfaces import CartManagerFactoryI
from cart.domain.services import CartService
from cart.repositories import CartManagerFactory
from config import Config, init_config
from core.logging import AbstractLogger, AppLogger
from gateways.db import InMemoryStorage
from products.domain.interfaces import CatalogI
from products.domain.services import ProductsService
from products.repositories import InMemoryProductsRepository
from products.schemas import ProductDTO
from sessions.domain.services import SessionsService
from sessions.sessions import SessionCreator, SessionCreatorI


@lru_cache(1)
def get_container() -> punq.Container:
    return _init_container()


def _init_container(cfg: Config | None = None) -> punq.Container:
    container = punq.Container()
    cfg = cfg or init_config()
    logger = AppLogger(cfg.debug, cfg.logging.error_log_path)
    catalog = InMemoryProductsRepository(
        ProductDTO.model_validate(product, from_attributes=True)
        for product in cfg.catalog
    )
    container.register(Config, instance=cfg)
    container.register(AbstractLogger, instance=logger)
    container.register(InMemoryStorage, instance=InMemoryStorage())
    container.register(CatalogI, instance=catalog)
    container.register(SessionCreatorI, SessionCreator, key_length=16)
    container.register(CartManagerFactoryI, CartManagerFactory)
    container.register(ProductsService, scope=punq.Scope.singleton)
    container.register(SessionsService, scope=punq.Scope.singleton)
    container.register(
        CartService,
        currency_symbol=cfg.currency.symbol,
        currency_precision=cfg.currency.precision,
    )
    logger.debug("Container initialized", catalog_size=len(cfg.catalog))
    return container


def Resolve[T](dep: type[T] | str, **kwargs) -> T:
    return t.cast(T, get_container().resolve(dep, **kwargs))


def cart_service_factory(session_key: str) -> CartService:
    cart_manager = Resolve(CartManagerFactoryI).create(session_key)
    return Resolve(CartService, cart_manager=cart_manager)
