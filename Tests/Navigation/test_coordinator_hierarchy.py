# test_coordinator_hierarchy.py
# Unit tests for nested coordinators

import gc

import pytest

from navstack.navigation import (
    Coordinator, FullScreen, NavigationError, NavigationErrorType, ancestors,
    is_presenting_in_chain, root_coordinator,
)

from Tests.navigation_test_utilities import DetailDestination, HomeDestination


@pytest.fixture
def chain():
    """Three coordinators: outer <- middle <- inner."""
    outer = Coordinator(HomeDestination())
    middle = outer.make_child(HomeDestination())
    inner = middle.make_child(HomeDestination())
    return outer, middle, inner


class TestLinks:
    """Test parent links and chain helpers."""

    def test_make_child_links_parent(self, coordinator):
        child = coordinator.make_child(HomeDestination())

        assert child.parent is coordinator
        assert child.nesting_level == 1
        assert coordinator.nesting_level == 0

    def test_chain_helpers(self, chain):
        outer, middle, inner = chain

        assert list(ancestors(inner)) == [middle, outer]
        assert root_coordinator(inner) is outer
        assert root_coordinator(outer) is outer
        assert inner.nesting_level == 2
        assert inner.snapshot().nesting_level == 2

    def test_parent_is_weak(self):
        parent = Coordinator(HomeDestination())
        child = parent.make_child(HomeDestination())

        del parent
        gc.collect()

        assert child.parent is None
        assert child.nesting_level == 0

    def test_attach_parent_once(self):
        parent = Coordinator(HomeDestination())
        child = Coordinator(HomeDestination())

        child.attach_parent(parent)
        child.attach_parent(parent)

        assert child.parent is parent

    def test_attach_second_parent_rejected(self):
        child = Coordinator(HomeDestination(), parent=Coordinator(HomeDestination()))
        other = Coordinator(HomeDestination())

        with pytest.raises(NavigationError) as exc_info:
            child.attach_parent(other)
        assert exc_info.value.error_type is NavigationErrorType.ALREADY_ATTACHED

    def test_attach_after_parent_collected(self):
        parent = Coordinator(HomeDestination())
        child = parent.make_child(HomeDestination())
        replacement = Coordinator(HomeDestination())

        del parent
        gc.collect()
        child.attach_parent(replacement)

        assert child.parent is replacement
        assert child.nesting_level == 1

    def test_attach_self_rejected(self):
        coordinator = Coordinator(HomeDestination())

        with pytest.raises(NavigationError) as exc_info:
            coordinator.attach_parent(coordinator)
        assert exc_info.value.error_type is NavigationErrorType.CYCLE

    def test_attach_descendant_rejected(self, chain):
        outer, _, inner = chain

        with pytest.raises(NavigationError) as exc_info:
            outer.attach_parent(inner)
        assert exc_info.value.error_type is NavigationErrorType.CYCLE
        assert outer.parent is None


class TestDelegation:
    """Test dismissals crossing coordinator boundaries."""

    def test_dismiss_delegates_to_parent(self, coordinator, recorder):
        coordinator.present(DetailDestination("modal"), FullScreen(True), on_dismiss=recorder("modal"))
        child = coordinator.make_child(DetailDestination("child root"))

        child.dismiss()

        assert coordinator.full_screen is None
        assert recorder.calls == ["modal"]

    def test_child_modal_dismissed_before_parent(self, coordinator, recorder):
        coordinator.present(DetailDestination("outer"), on_dismiss=recorder("outer"))
        child = coordinator.make_child(HomeDestination())
        child.present(DetailDestination("inner"), on_dismiss=recorder("inner"))

        child.dismiss()

        assert not child.has_presented_view
        assert coordinator.has_presented_view
        assert recorder.calls == ["inner"]

    def test_dismiss_without_parent_pops(self, coordinator, recorder):
        coordinator.push(DetailDestination("a"), on_dismiss=recorder("a"))
        coordinator.push(DetailDestination("b"), on_dismiss=recorder("b"))

        coordinator.dismiss()

        assert coordinator.pages_count == 1
        assert recorder.calls == ["b"]

    def test_child_dismiss_does_not_pop_child_stack(self, coordinator):
        coordinator.present(DetailDestination("modal"))
        child = coordinator.make_child(HomeDestination())
        child.push(DetailDestination("inside"))

        child.dismiss()

        assert child.pages_count == 1
        assert not coordinator.has_presented_view

    def test_dismiss_all_walks_every_ancestor(self, chain, recorder):
        outer, middle, inner = chain
        outer.present(DetailDestination("outer"), on_dismiss=recorder("outer"))
        middle.present(DetailDestination("middle"), FullScreen(), on_dismiss=recorder("middle"))
        inner.present(DetailDestination("inner"), on_dismiss=recorder("inner"))

        inner.dismiss_all()

        assert not any(c.has_presented_view for c in chain)
        assert recorder.calls == ["inner", "middle", "outer"]

    def test_is_presenting_in_chain(self, chain):
        outer, _, inner = chain
        assert not is_presenting_in_chain(inner)

        outer.present(DetailDestination())

        assert is_presenting_in_chain(inner)
        assert not inner.has_presented_view
