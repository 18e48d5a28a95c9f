"""Statement templates and the feature shapes they are built from."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from querygen.keywords.catalog import KeywordCatalog
from querygen.tokens.models import TokenInfo
from querygen.utils.randomness import coin_flip, get_random_integer, get_rng

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Keyword:
    """An abstract keyword, resolved per dialect at assembly time."""

    name: str
    variant: int = 0


@dataclass(frozen=True)
class Literal:
    """Static template text (punctuation etc.), identical in every dialect."""

    text: str


TemplateElement = Keyword | Literal | TokenInfo


@dataclass(frozen=True)
class StatementTemplate:
    """Ordered elements of one abstract statement."""

    elements: tuple[TemplateElement, ...]
    separator: str = " "
    terminator: str = ";"
    name: str = ""

    @property
    def token_infos(self) -> list[TokenInfo]:
        return [el for el in self.elements if isinstance(el, TokenInfo)]

    @property
    def keywords(self) -> list[Keyword]:
        return [el for el in self.elements if isinstance(el, Keyword)]


@dataclass(frozen=True)
class FeatureStep:
    feature: str
    required: bool = True


@dataclass(frozen=True)
class StatementShape:
    """An ordered list of features a statement is made of."""

    name: str
    steps: tuple[FeatureStep, ...] = field(default_factory=tuple)

    def is_available(self, catalog: KeywordCatalog) -> bool:
        """True when every required feature is enabled."""
        return all(catalog.is_enabled(step.feature) for step in self.steps if step.required)


def _steps(*features: str, optional: Sequence[str] = ()) -> tuple[FeatureStep, ...]:
    return tuple(FeatureStep(feature, required=feature not in optional) for feature in features)


CREATE_TABLE = StatementShape(
    "create_table",
    _steps("DDL_CREATE", "DDL_PARTITION", "DDL_CLUSTER", optional=("DDL_PARTITION", "DDL_CLUSTER")),
)
INSERT = StatementShape("insert", _steps("DML_INSERT", "DML_VALUES"))
UPDATE = StatementShape("update", _steps("DML_UPDATE", "DML_SET", "DML_WHERE"))
DELETE = StatementShape("delete", _steps("DML_DELETE", "DML_WHERE"))
SELECT = StatementShape(
    "select",
    _steps(
        "DQL_SELECT",
        "DQL_FROM",
        "DQL_WHERE",
        "DQL_GROUP_BY",
        "DQL_WINDOW",
        "DQL_ORDER_BY",
        "DQL_LIMIT",
        "DQL_OFFSET",
        optional=(
            "DQL_WHERE",
            "DQL_GROUP_BY",
            "DQL_WINDOW",
            "DQL_ORDER_BY",
            "DQL_LIMIT",
            "DQL_OFFSET",
        ),
    ),
)

DEFAULT_SHAPES: tuple[StatementShape, ...] = (CREATE_TABLE, INSERT, UPDATE, DELETE, SELECT)


def build_template(
    shape: StatementShape,
    catalog: KeywordCatalog,
    rng: np.random.Generator | None = None,
) -> StatementTemplate:
    """Expand a shape into a template.

    For each feature one variant is drawn and its tokens follow the keyword.
    Optional features (when enabled) and optional tokens are kept on a coin
    flip. All draws happen here, once, so every dialect sees the same template.

    Raises:
        DisabledKeywordError: If a required feature is not enabled.
    """
    rng = rng if rng is not None else get_rng()
    elements: list[TemplateElement] = []

    for step in shape.steps:
        if not step.required and (not catalog.is_enabled(step.feature) or not coin_flip(rng)):
            continue
        variants = catalog.variants(step.feature)
        variant = get_random_integer(len(variants) - 1, rng)
        elements.append(Keyword(step.feature, variant))

        for spec in variants[variant].tokens:
            if not spec.required and not coin_flip(rng):
                continue
            elements.append(TokenInfo(spec.token_name, {"count": spec.count, **spec.params}))

    logger.debug("Built %s template with %s element(s)", shape.name, len(elements))
    return StatementTemplate(elements=tuple(elements), name=shape.name)
