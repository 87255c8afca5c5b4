import pytest

from flappy_core.client import dispatch_action, main
from flappy_core.data_models import Phase


def test_action_starts_then_flaps(make_controller):
    controller = make_controller()
    assert dispatch_action(controller) is True
    assert controller.phase is Phase.PLAYING
    assert controller.context.bird.vy == 0.0

    assert dispatch_action(controller) is True
    assert controller.context.bird.vy == pytest.approx(-8.2)


def test_action_on_game_over_screen_does_not_restart(make_controller):
    controller = make_controller()
    dispatch_action(controller)
    bird = controller.context.bird
    bird.y = controller.context.ground_y
    controller.tick(0)
    assert controller.phase is Phase.GAME_OVER

    assert dispatch_action(controller) is False
    assert controller.phase is Phase.GAME_OVER
    assert controller.on_restart() is True


def test_unknown_log_level_is_rejected_on_the_command_line(capsys):
    with pytest.raises(SystemExit):
        main(["--log-level", "basic_format"])
    assert "invalid choice" in capsys.readouterr().err
