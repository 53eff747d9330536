"""Views shared by every product: loading, error, empty and home."""

from __future__ import annotations

from collections.abc import Callable

from cloudbrowse.constants.values import APP_TITLE, PRODUCT_INSTANCES, PRODUCT_KUBERNETES
from cloudbrowse.keyboard.keys import (
    KEY_ENTER,
    KEY_ESCAPE,
    KEY_REFRESH,
    KEYS_CONFIRM,
    KEYS_DOWN,
    KEYS_UP,
)
from cloudbrowse.models.state.context import BrowserContext
from cloudbrowse.views.base import BaseView, View, ViewResult
from cloudbrowse.views.components.selection_list import SelectionList, SelectionOption
from cloudbrowse.views.rendering import (
    STYLE_BOX_TITLE,
    STYLE_MUTED,
    STYLE_SELECTED,
    render_error,
    styled,
)
from cloudbrowse.views.signals import Effect, LoadFailed, Message, ShowProduct

# Returns the view to show for a message, or None when it does not apply.
ViewBuilder = Callable[[Message], "View | None"]


class LoadingView(BaseView):
    """Placeholder shown while ``effect`` runs.

    The first message ``build`` accepts replaces this view with the built
    one. A ``LoadFailed`` for the same effect replaces it with an
    ``ErrorView``.
    """

    def __init__(
        self,
        ctx: BrowserContext,
        message: str,
        effect: Effect,
        build: ViewBuilder,
    ) -> None:
        super().__init__(ctx)
        self.message = message
        self.effect = effect
        self._build = build

    def render(self, width: int, height: int) -> str:
        return styled(f"⏳ {self.message}", STYLE_BOX_TITLE)

    def handle_key(self, key: str) -> ViewResult:
        if key == KEY_ESCAPE:
            return ViewResult.go_back()
        return ViewResult.none()

    def handle_message(self, message: Message) -> ViewResult:
        if isinstance(message, LoadFailed):
            if message.effect == self.effect:
                return ViewResult.replace(ErrorView(self.ctx, message.error))
            return ViewResult.none()
        view = self._build(message)
        if view is None:
            return ViewResult.none()
        return ViewResult.replace(view)

    def title(self) -> str:
        return "Loading"

    def help_text(self) -> str:
        return "Loading... Please wait • Esc: Back"


class ErrorView(BaseView):
    """Error message; Enter or Escape goes back."""

    def __init__(self, ctx: BrowserContext, error: str) -> None:
        super().__init__(ctx)
        self.error = error

    def render(self, width: int, height: int) -> str:
        return render_error(f"❌ Error: {self.error}")

    def handle_key(self, key: str) -> ViewResult:
        if key in KEYS_CONFIRM:
            return ViewResult.go_back()
        return ViewResult.none()

    def title(self) -> str:
        return "Error"

    def help_text(self) -> str:
        return "Esc/Enter: Go back"


class EmptyView(BaseView):
    """Shown instead of a table when a product has no resources.

    ``r`` re-runs ``refresh``; a reload that finds resources replaces this
    view through ``rebuild``.
    """

    def __init__(
        self,
        ctx: BrowserContext,
        product: str,
        refresh: Effect | None = None,
        rebuild: ViewBuilder | None = None,
    ) -> None:
        super().__init__(ctx)
        self.product = product
        self._refresh = refresh
        self._rebuild = rebuild

    def render(self, width: int, height: int) -> str:
        return styled(f"No {self.product} found", STYLE_MUTED)

    def handle_key(self, key: str) -> ViewResult:
        if key == KEY_ESCAPE:
            return ViewResult.go_back()
        if key == KEY_REFRESH and self._refresh is not None:
            return ViewResult.emit(self._refresh)
        return ViewResult.none()

    def handle_message(self, message: Message) -> ViewResult:
        if self._rebuild is None:
            return ViewResult.none()
        view = self._rebuild(message)
        if view is None or isinstance(view, EmptyView):
            return ViewResult.none()
        return ViewResult.replace(view)

    def refresh_effect(self) -> Effect | None:
        return self._refresh

    def title(self) -> str:
        return self.product.capitalize()

    def help_text(self) -> str:
        if self._refresh is not None:
            return "r: Refresh • Esc: Back • q: Quit"
        return "Esc: Back • q: Quit"


PRODUCTS: tuple[SelectionOption[str], ...] = (
    SelectionOption(PRODUCT_INSTANCES, "Instances", "Compute instances"),
    SelectionOption(PRODUCT_KUBERNETES, "Kubernetes", "Managed Kubernetes clusters"),
)


class HomeView(BaseView):
    """Root view: pick a product to browse."""

    def __init__(self, ctx: BrowserContext) -> None:
        super().__init__(ctx)
        self.products: SelectionList[str] = SelectionList(PRODUCTS)

    def render(self, width: int, height: int) -> str:
        lines = []
        if self.ctx.project_label:
            lines.append(styled(f"Project: {self.ctx.project_label}", STYLE_MUTED))
            lines.append("")
        for index, option in enumerate(self.products.options):
            text = f" {option.label:<12} {option.description}"
            if index == self.products.selected_index:
                lines.append(styled(f"▸{text}", STYLE_SELECTED))
            else:
                lines.append(styled(f" {text}", STYLE_MUTED))
        return "\n".join(lines)

    def handle_key(self, key: str) -> ViewResult:
        if key in KEYS_UP:
            self.products.move_up()
        elif key in KEYS_DOWN:
            self.products.move_down()
        elif key == KEY_ENTER:
            option = self.products.selected()
            if option is not None:
                return ViewResult.emit(ShowProduct(option.value))
        return ViewResult.none()

    def title(self) -> str:
        return APP_TITLE

    def help_text(self) -> str:
        return "↑↓: Navigate • Enter: Open • q: Quit"


__all__ = [
    "PRODUCTS",
    "EmptyView",
    "ErrorView",
    "HomeView",
    "LoadingView",
    "ViewBuilder",
]
