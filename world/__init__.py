"""World: double-buffered Gray-Scott fields, stepping, seeding and the session that drives them."""

from world.grid import Grid
from world.field import Field
from world.reaction import step, laplacian, inject, dissolve
from world.session import Session, default_params, resolve_params

__all__ = ["Grid", "Field", "step", "laplacian", "inject", "dissolve", "Session", "default_params", "resolve_params"]
