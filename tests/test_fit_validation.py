from __future__ import annotations

from anchor_core.fit_validation import max_embedment_depth, validate_fit
from anchor_core.model import AnchorDimensions, ConcreteDimensions


def test_default_configuration_fits() -> None:
    res = validate_fit(ConcreteDimensions(), AnchorDimensions())
    assert res.is_valid
    assert res.errors == ()


def test_embedment_limit_message_mentions_limit() -> None:
    res = validate_fit(ConcreteDimensions(thickness=300), AnchorDimensions(embed_depth=400))
    assert not res.is_valid
    assert res.errors == ("Embedment depth exceeds maximum allowed (290mm)",)


def test_embedment_at_limit_is_accepted() -> None:
    concrete = ConcreteDimensions(thickness=300)
    assert max_embedment_depth(concrete) == 290
    assert validate_fit(concrete, AnchorDimensions(embed_depth=290)).is_valid
    assert not validate_fit(concrete, AnchorDimensions(embed_depth=291)).is_valid


def test_all_rules_reported_in_order() -> None:
    concrete = ConcreteDimensions(width=100, depth=100, thickness=100)
    anchor = AnchorDimensions(width=150, depth=120, embed_depth=95)
    res = validate_fit(concrete, anchor)
    assert not res.is_valid
    assert list(res.errors) == [
        "Anchor width exceeds concrete width",
        "Anchor depth exceeds concrete depth",
        "Embedment depth exceeds maximum allowed (90mm)",
    ]


def test_anchor_height_is_not_checked() -> None:
    concrete = ConcreteDimensions(height=100)
    anchor = AnchorDimensions(height=300)
    assert validate_fit(concrete, anchor).is_valid


def test_accepted_configurations_respect_safety_margin() -> None:
    for thickness in (100, 150, 300, 1000):
        for embed in range(20, 300, 13):
            res = validate_fit(ConcreteDimensions(thickness=thickness), AnchorDimensions(embed_depth=embed))
            if res.is_valid:
                assert embed <= thickness - 10


def test_to_dict_shape() -> None:
    res = validate_fit(ConcreteDimensions(width=100), AnchorDimensions(width=150))
    assert res.to_dict() == {"isValid": False, "errors": ["Anchor width exceeds concrete width"]}
