"""State machine behind the game client's login and registration launcher."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Union

from arenahub.gui import GuiSettings

DEFAULT_LAUNCHER_WINDOW_SIZE: tuple[float, float] = (400.0, 280.0)


class LauncherView(Enum):
    """The views the launcher can show."""

    LOGIN = "Login"
    REGISTER = "Register"
    ERROR = "Error"

    def __str__(self) -> str:
        return self.value


@dataclass
class LoginViewData:
    """Text entered in the login view."""

    user: str = ""
    password: str = ""


@dataclass
class RegisterViewData:
    """Text entered in the registration view."""

    user: str = ""
    password_1: str = ""
    password_2: str = ""


ViewData = Union[LoginViewData, RegisterViewData, None]

_BUTTONS: dict[LauncherView, tuple[str, ...]] = {
    LauncherView.LOGIN: ("Login", "Register"),
    LauncherView.REGISTER: ("Register", "Login"),
    LauncherView.ERROR: ("Back",),
}


def _fresh_data(view: LauncherView) -> ViewData:
    if view is LauncherView.LOGIN:
        return LoginViewData()
    if view is LauncherView.REGISTER:
        return RegisterViewData()
    return None


class GuiLauncher:
    """Launcher window logic: current view, its input, and pending transitions.

    Button presses may request a new view; the switch happens when the frame
    is finished, so the current frame always completes with one view.
    """

    def __init__(
        self,
        gui_settings: GuiSettings,
        *,
        view: LauncherView = LauncherView.LOGIN,
        register_delay: float = 1.0,
    ) -> None:
        self.gui_settings = gui_settings
        self.view = view
        self.data: ViewData = _fresh_data(view)
        self.register_delay = register_delay
        self._next_view: LauncherView | None = None

    @property
    def label(self) -> str:
        """Title of the launcher window for the current view."""
        return self.view.value

    @property
    def buttons(self) -> tuple[str, ...]:
        """Buttons available in the current view."""
        return _BUTTONS[self.view]

    def press(self, button: str) -> None:
        """Handle a press of the named button in the current view."""
        if button not in _BUTTONS[self.view]:
            raise ValueError(f"view {self.view} has no button {button!r}")

        if self.view is LauncherView.LOGIN:
            assert isinstance(self.data, LoginViewData)
            if button == "Login":
                print(
                    f"Attempting to login with user={self.data.user}, "
                    f"psswd={self.data.password}"
                )
            else:
                print("Changing view to register")
                self._next_view = LauncherView.REGISTER
        elif self.view is LauncherView.REGISTER:
            assert isinstance(self.data, RegisterViewData)
            if button == "Register":
                print(
                    f"Attempting to register with user={self.data.user}, "
                    f"psswd={self.data.password_1}/{self.data.password_2}"
                )
                if self.register_delay > 0:
                    time.sleep(self.register_delay)
            else:
                print("Changing view to login")
                self._next_view = LauncherView.LOGIN
        else:
            print("Changing view to login")
            self._next_view = LauncherView.LOGIN

    def finish_frame(self) -> LauncherView | None:
        """Apply a pending view change; return the new view, or None if none."""
        next_view, self._next_view = self._next_view, None
        if next_view is None:
            return None
        print(f"Transition launcher view: {self.view} -> {next_view}.")
        self.view = next_view
        self.data = _fresh_data(next_view)
        return next_view

    def window_size(self) -> tuple[float, float]:
        """Launcher window size scaled by the GUI settings."""
        scale = self.gui_settings.scale
        width, height = DEFAULT_LAUNCHER_WINDOW_SIZE
        return (width * scale, height * scale)

    def window_position(
        self, screen_width: float, screen_height: float
    ) -> tuple[float, float]:
        """Top-left corner that centres the launcher window on the screen."""
        width, height = self.window_size()
        return ((screen_width - width) / 2.0, (screen_height - height) / 2.0)