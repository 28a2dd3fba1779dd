"""Tests for the Selector accumulator and PartKind."""

import pytest

from object_tasks.selector import OrderViolation, PartKind, Selector


class TestPartKind:
    def test_rank_order(self):
        ranks = [kind.rank for kind in PartKind]
        assert ranks == sorted(ranks) == list(range(6))

    def test_singletons(self):
        singletons = {kind for kind in PartKind if kind.singleton}
        assert singletons == {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (PartKind.ELEMENT, "x"),
            (PartKind.ID, "#x"),
            (PartKind.CLASS, ".x"),
            (PartKind.ATTRIBUTE, "[x]"),
            (PartKind.PSEUDO_CLASS, ":x"),
            (PartKind.PSEUDO_ELEMENT, "::x"),
        ],
    )
    def test_format(self, kind, expected):
        assert kind.format("x") == expected


class TestSelector:
    def test_start(self):
        sel = Selector.start("main", PartKind.ID)
        assert sel.text == "#main"
        assert sel.kinds == (PartKind.ID,)
        assert sel.last_kind is PartKind.ID

    def test_append_returns_new_selector(self):
        sel = Selector.start("a", PartKind.ELEMENT)
        longer = sel.append(".b", PartKind.CLASS)
        assert longer.render() == "a.b"
        assert longer.kinds == (PartKind.ELEMENT, PartKind.CLASS)
        assert sel.render() == "a"

    def test_append_same_rank(self):
        sel = Selector.start("a", PartKind.CLASS).append(".b", PartKind.CLASS)
        assert sel.render() == ".a.b"

    def test_append_lower_rank_fails(self):
        sel = Selector.start("hover", PartKind.PSEUDO_CLASS)
        with pytest.raises(OrderViolation):
            sel.append("#id", PartKind.ID)

    def test_append_does_not_check_singletons(self):
        # Uniqueness is enforced by the chain facade, not the accumulator.
        sel = Selector.start("a", PartKind.ELEMENT).append("b", PartKind.ELEMENT)
        assert sel.render() == "ab"

    def test_combined(self):
        left = Selector.start("ul", PartKind.ELEMENT)
        right = Selector.start("li", PartKind.ELEMENT)
        combined = Selector.combined(left, ">", right)
        assert combined.render() == "ul > li"
        assert combined.kinds == ()
        assert combined.last_kind is None

    def test_render_is_verbatim(self):
        assert Selector(text=' a  [b="c"] ').render() == ' a  [b="c"] '

    def test_str(self):
        assert str(Selector.start("p", PartKind.ELEMENT)) == "p"

    def test_frozen(self):
        sel = Selector.start("p", PartKind.ELEMENT)
        with pytest.raises(AttributeError):
            sel.text = "q"  # type: ignore[misc]
