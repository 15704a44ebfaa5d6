"""Full-screen prompt_toolkit application: layout, key bindings and refresh tick."""

import logging

from prompt_toolkit import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame

from core.app_state import AppState, Tab
from ui import options_view, stats_view, test_view
from ui.tabs import render_tabs

log = logging.getLogger("termotype.screen")

STYLE = Style.from_dict({
    "title": "#00afaf bold",
    "tab": "#ffffff",
    "tab.active": "#ffd700 bold reverse",
    "stats": "#ffd700 bold",
    "char.correct": "#00ff00",
    "char.incorrect": "#ff0000 bold",
    "char.untyped": "#a8a8a8",
    "cursor": "reverse",
    "word.done": "#585858",
    "word.error": "#af0000 underline",
    "word.pending": "#ffffff",
    "finished": "#00ff00 bold",
    "best": "#ffd700 bold",
    "help": "#808080",
    "heading": "#ffd700 bold",
    "selected": "#ffd700 bold",
    "value.wpm": "#ffd700 bold",
    "value.cpm": "#00ff00",
    "value.accuracy": "#00afff",
})

_VIEWS = {
    Tab.TEST: test_view.render,
    Tab.STATS: stats_view.render,
    Tab.OPTIONS: options_view.render,
}


def render_body(state: AppState) -> StyleAndTextTuples:
    return _VIEWS[state.current_tab](state)


def create_key_bindings(state: AppState) -> KeyBindings:
    """Key dispatch: translates key presses into AppState calls."""
    kb = KeyBindings()
    on_test_tab = Condition(lambda: state.current_tab == Tab.TEST)
    on_options_tab = Condition(lambda: state.current_tab == Tab.OPTIONS)

    def _quit(event: KeyPressEvent) -> None:
        state.quit()
        event.app.exit()

    kb.add("escape", eager=True)(_quit)
    kb.add("c-c")(_quit)
    kb.add("q", filter=~on_test_tab)(_quit)

    @kb.add("tab")
    def _next_tab(event: KeyPressEvent) -> None:
        state.next_tab()

    @kb.add("s-tab")
    def _prev_tab(event: KeyPressEvent) -> None:
        state.prev_tab()

    for number, tab in enumerate(Tab, start=1):
        kb.add(str(number), filter=~on_test_tab)(
            lambda event, tab=tab: state.select_tab(tab)
        )

    @kb.add("t", filter=on_options_tab)
    def _time_mode(event: KeyPressEvent) -> None:
        state.set_time_mode()

    @kb.add("w", filter=on_options_tab)
    def _words_mode(event: KeyPressEvent) -> None:
        state.set_words_mode()

    @kb.add("enter", filter=on_test_tab)
    def _reset(event: KeyPressEvent) -> None:
        state.reset_test()

    @kb.add("backspace", filter=on_test_tab)
    def _backspace(event: KeyPressEvent) -> None:
        state.handle_backspace()

    @kb.add(Keys.Any, filter=on_test_tab)
    def _type(event: KeyPressEvent) -> None:
        data = event.data
        if len(data) == 1 and data.isprintable():
            state.handle_char(data)

    return kb


def create_application(state: AppState) -> Application:
    """Build the application; each redraw first runs the auto-finish tick."""
    tab_bar = Window(
        FormattedTextControl(lambda: render_tabs(state.current_tab)), height=1
    )
    body = Window(FormattedTextControl(lambda: render_body(state)), wrap_lines=True)

    return Application(
        layout=Layout(HSplit([tab_bar, Frame(body, title=lambda: state.current_tab.label)])),
        key_bindings=create_key_bindings(state),
        style=STYLE,
        full_screen=True,
        refresh_interval=state.settings.tick_interval_ms / 1000.0,
        before_render=lambda app: state.tick(),
    )


def run(state: AppState) -> None:
    """Run the terminal UI until the user quits."""
    if state.engine is None:
        state.init_test()

    log.info("Starting terminal UI")
    create_application(state).run()
    log.info("Terminal UI exited")
