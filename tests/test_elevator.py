import pytest

from practicekit.elevator import (
    ButtonPressed,
    CarArrived,
    CarDoorClosed,
    CarDoorOpened,
    CarFloor,
    Direction,
    LobbyCall,
    car_arrived,
    car_door_closed,
    car_door_opened,
    car_floor_button_pressed,
    lobby_call_button_pressed,
    main,
)


@pytest.mark.parametrize("floor", [0, 3, -2])
def test_car_arrived(floor):
    assert car_arrived(floor) == CarArrived(floor)


def test_door_events():
    assert car_door_opened() == CarDoorOpened()
    assert car_door_closed() == CarDoorClosed()
    assert isinstance(car_door_opened(), CarDoorOpened)
    assert not isinstance(car_door_opened(), CarDoorClosed)


def test_lobby_call():
    event = lobby_call_button_pressed(0, Direction.UP)
    assert event == ButtonPressed(LobbyCall(Direction.UP, 0))
    assert event.button.direction is Direction.UP


def test_car_floor_button():
    assert car_floor_button_pressed(3) == ButtonPressed(CarFloor(3))


def test_events_can_be_matched():
    def describe(event):
        match event:
            case ButtonPressed(button=LobbyCall(direction=direction, floor=floor)):
                return ("lobby", direction, floor)
            case ButtonPressed(button=CarFloor(floor=floor)):
                return ("car", floor)
            case CarArrived(floor=floor):
                return ("arrived", floor)
        return None

    assert describe(lobby_call_button_pressed(5, Direction.DOWN)) == ("lobby", Direction.DOWN, 5)
    assert describe(car_floor_button_pressed(7)) == ("car", 7)
    assert describe(car_arrived(2)) == ("arrived", 2)


def test_events_are_hashable():
    events = {car_arrived(1), car_arrived(1), car_door_opened()}
    assert events == {CarArrived(1), CarDoorOpened()}


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert repr(lobby_call_button_pressed(0, Direction.UP)) in out
    assert repr(car_arrived(3)) in out
    assert repr(car_door_closed()) in out