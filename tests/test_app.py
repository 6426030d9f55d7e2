import json

from scicalc.apps.calculator import CalculatorApp
from scicalc.storage import StateStore

SIZE = (100, 60)


async def test_keyboard_mirrors_keypad(tmp_path):
    app = CalculatorApp(store=StateStore(tmp_path / "state.json"))
    async with app.run_test(size=SIZE) as pilot:
        await pilot.press("9", "9", "+", "3", "3", "enter")
        await pilot.pause()
        assert app.session.state.display == "132"
        assert app.display_text == "132"
        assert app.celebrating


async def test_keypad_buttons(tmp_path):
    app = CalculatorApp(store=StateStore(tmp_path / "state.json"))
    async with app.run_test(size=SIZE) as pilot:
        await pilot.click("#number-5")
        await pilot.click("#factorial")
        await pilot.pause()
        assert app.display_text == "120"

        await pilot.click("#angle")
        await pilot.pause()
        assert app.session.state.angle_mode == "degree"


async def test_errors_show_in_banner(tmp_path):
    app = CalculatorApp(store=StateStore(tmp_path / "state.json"))
    async with app.run_test(size=SIZE) as pilot:
        await pilot.press("0")
        await pilot.click("#ln")
        await pilot.pause()
        assert app.error_text == "Invalid input for logarithm"
        assert app.query_one("#error").display


async def test_theme_is_persisted_and_restored(tmp_path):
    path = tmp_path / "state.json"
    path.write_text(json.dumps({"memory": 42, "isDarkMode": False}))

    app = CalculatorApp(store=StateStore(path))
    async with app.run_test(size=SIZE) as pilot:
        assert app.theme == "textual-light"
        await pilot.click("#mr")
        await pilot.click("#theme")
        await pilot.pause()
        assert app.display_text == "42"
        assert app.theme == "textual-dark"

    assert json.loads(path.read_text()) == {"memory": 42.0, "isDarkMode": True}

