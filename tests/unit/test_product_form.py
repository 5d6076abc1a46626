"""
Product form component tests.

Covers the form state contract: initial state, image list parsing,
field errors, notifications, navigation and single-flight submission.
"""

from __future__ import annotations

import pytest

from verdant.components.product_actions import ActionResult, ProductFormData, UploadedImage
from verdant.components.product_form import (
    PRODUCT_LIST_ROUTE,
    ProductFormController,
    SubmissionInProgressError,
    build_form_view,
    initial_form_state,
    resolve_outcome,
    run_submit,
    submit_label,
    submitted_values,
)
from verdant.domain.entities import Category, Product

CATEGORIES = [Category(id="c1", name="Fruits"), Category(id="c2", name="Vegetables")]


def make_product(image_url: str | None) -> Product:
    return Product(
        id="p1",
        name="Apples",
        price=4.5,
        description="Crisp",
        long_description="Crisp apples",
        category_id="c1",
        image_url=image_url,
        data_ai_hint="red apples",
        is_featured=True,
    )


class MockActions:
    """Records which action the form dispatched to."""

    def __init__(self, result: ActionResult) -> None:
        self.result = result
        self.calls: list[tuple] = []

    def add_product(self, form: ProductFormData, images: list[UploadedImage]) -> ActionResult:
        self.calls.append(("add", form, images))
        return self.result

    def update_product(self, product_id, form, images) -> ActionResult:
        self.calls.append(("update", product_id, form, images))
        return self.result


# --- Initial State ---


class TestInitialState:
    def test_initial_form_state(self) -> None:
        state = initial_form_state()

        assert state.message == ""
        assert state.success is False
        assert state.errors == {}

    def test_new_product_view(self) -> None:
        view = build_form_view(CATEGORIES)

        assert view.is_editing is False
        assert view.request_state == "idle"
        assert view.image_urls == []
        assert view.existing_image_field == "[]"
        assert view.values == {}

    def test_edit_view_parses_json_images(self) -> None:
        raw = '["https://cdn.example.com/a.png", "https://cdn.example.com/b.png"]'

        view = build_form_view(CATEGORIES, make_product(raw))

        assert view.is_editing is True
        assert view.image_urls == [
            "https://cdn.example.com/a.png",
            "https://cdn.example.com/b.png",
        ]
        assert view.existing_image_field == raw

    def test_edit_view_legacy_single_url(self) -> None:
        view = build_form_view(CATEGORIES, make_product("https://cdn.example.com/old.jpg"))

        assert view.image_urls == ["https://cdn.example.com/old.jpg"]
        assert view.existing_image_field == "https://cdn.example.com/old.jpg"

    def test_edit_view_without_images(self) -> None:
        view = build_form_view(CATEGORIES, make_product(None))

        assert view.image_urls == []
        assert view.existing_image_field == "[]"

    def test_edit_view_prefills_values(self) -> None:
        view = build_form_view(CATEGORIES, make_product("[]"))

        assert view.values["name"] == "Apples"
        assert view.values["price"] == "4.50"
        assert view.values["category_id"] == "c1"
        assert view.checked("is_featured") is True
        assert view.checked("is_best_seller") is False


# --- Field Errors ---


class TestFieldErrors:
    def test_first_message_only(self) -> None:
        state = ActionResult(
            message="Please fix the errors below.",
            errors={"name": ["Name is required", "Name must not exceed 200 characters"]},
        )

        view = build_form_view(CATEGORIES, state=state, request_state="failed")

        assert view.error_for("name") == "Name is required"

    def test_field_without_errors(self) -> None:
        state = ActionResult(errors={"name": ["Name is required"]})

        view = build_form_view(CATEGORIES, state=state)

        assert view.error_for("price") is None

    def test_empty_message_list(self) -> None:
        view = build_form_view(CATEGORIES, state=ActionResult(errors={"price": []}))
        assert view.error_for("price") is None

    def test_submitted_values_keep_user_input(self) -> None:
        form = ProductFormData(name="Pears", price="abc", is_featured="on")

        values = submitted_values(form)

        assert values["name"] == "Pears"
        assert values["price"] == "abc"
        assert values["is_featured"] == "on"
        assert "image_url" not in values


# --- Outcome ---


class TestResolveOutcome:
    def test_success_when_creating_navigates_to_list(self) -> None:
        outcome = resolve_outcome(ActionResult(message="Added", success=True), is_editing=False)

        assert outcome.navigate_to == PRODUCT_LIST_ROUTE
        assert outcome.notification is not None
        assert outcome.notification.title == "Success!"
        assert outcome.notification.description == "Added"
        assert outcome.notification.variant == "default"

    def test_success_when_editing_stays(self) -> None:
        outcome = resolve_outcome(ActionResult(message="Updated", success=True), is_editing=True)

        assert outcome.navigate_to is None
        assert outcome.notification is not None
        assert outcome.notification.title == "Success!"

    @pytest.mark.parametrize("is_editing", [True, False])
    def test_failure_never_navigates(self, is_editing: bool) -> None:
        outcome = resolve_outcome(
            ActionResult(message="Database Error", success=False), is_editing=is_editing
        )

        assert outcome.navigate_to is None
        assert outcome.notification is not None
        assert outcome.notification.variant == "destructive"
        assert outcome.notification.title == "Error"
        assert outcome.notification.description == "Database Error"

    def test_no_message_no_effects(self) -> None:
        outcome = resolve_outcome(ActionResult(message="", success=True), is_editing=False)

        assert outcome.notification is None
        assert outcome.navigate_to is None


# --- Request State ---


class TestController:
    def test_idle_pending_succeeded(self) -> None:
        controller = ProductFormController(is_editing=False)
        assert controller.request_state == "idle"

        controller.begin_submit()
        assert controller.request_state == "pending"
        assert controller.pending is True

        controller.settle(ActionResult(message="ok", success=True))
        assert controller.request_state == "succeeded"
        assert controller.pending is False

    def test_failed_state_keeps_result(self) -> None:
        controller = ProductFormController(is_editing=True)
        result = ActionResult(message="bad", errors={"price": ["Price is required"]})

        controller.begin_submit()
        controller.settle(result)

        assert controller.request_state == "failed"
        assert controller.state == result

    def test_second_submit_while_pending_is_refused(self) -> None:
        controller = ProductFormController(is_editing=False)
        controller.begin_submit()

        with pytest.raises(SubmissionInProgressError):
            controller.begin_submit()

    def test_can_resubmit_after_settling(self) -> None:
        controller = ProductFormController(is_editing=False)
        controller.begin_submit()
        controller.settle(ActionResult(message="bad"))

        controller.begin_submit()

        assert controller.request_state == "pending"

    def test_submit_labels(self) -> None:
        assert submit_label(is_editing=False, pending=False) == "Add Product"
        assert submit_label(is_editing=True, pending=False) == "Update Product"
        assert submit_label(is_editing=False, pending=True) == "Adding..."
        assert submit_label(is_editing=True, pending=True) == "Updating..."


# --- Submission ---


class TestRunSubmit:
    def test_without_product_id_calls_add(self) -> None:
        actions = MockActions(ActionResult(message="Added", success=True))
        controller = ProductFormController(is_editing=False)
        form = ProductFormData(name="Pears")

        outcome = run_submit(controller, form, [], actions)

        assert actions.calls == [("add", form, [])]
        assert outcome.navigate_to == PRODUCT_LIST_ROUTE
        assert controller.request_state == "succeeded"

    def test_with_product_id_calls_update(self) -> None:
        actions = MockActions(ActionResult(message="Updated", success=True))
        controller = ProductFormController(is_editing=True)
        form = ProductFormData(name="Pears")

        outcome = run_submit(controller, form, [], actions, product_id="p1")

        assert actions.calls == [("update", "p1", form, [])]
        assert outcome.navigate_to is None

    def test_failure_never_navigates(self) -> None:
        actions = MockActions(ActionResult(message="Nope", success=False))
        controller = ProductFormController(is_editing=False)

        outcome = run_submit(controller, ProductFormData(), [], actions)

        assert outcome.navigate_to is None
        assert controller.request_state == "failed"

    def test_pending_controller_does_not_dispatch(self) -> None:
        actions = MockActions(ActionResult(message="Added", success=True))
        controller = ProductFormController(is_editing=False)
        controller.begin_submit()

        with pytest.raises(SubmissionInProgressError):
            run_submit(controller, ProductFormData(), [], actions)

        assert actions.calls == []
