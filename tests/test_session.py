import asyncio
import random
from dataclasses import replace

from season_snake.models import Food, Status
from season_snake.session import GameSession


def test_new_session_waits_for_start():
    session = GameSession(rng=random.Random(0))
    assert session.state.status == Status.READY
    assert not session.running
    assert session.interval_ms == 220
    assert session.tick() is session.state


def test_stop_is_idempotent():
    async def scenario():
        session = GameSession(rng=random.Random(0))
        session.stop()
        session.start()
        assert session.running
        assert session.state.status == Status.RUNNING
        session.stop()
        session.stop()
        assert not session.running

    asyncio.run(scenario())


def test_speed_change_updates_interval():
    session = GameSession(rng=random.Random(0))
    head = session.state.snake[0]
    session.state = replace(
        session.state,
        status=Status.RUNNING,
        obstacles=frozenset(),
        score=3,
        foods_eaten=3,
        food=Food(pos=(head[0] + 1, head[1]), color="#8ccf7a"),
    )
    session.tick()
    assert session.state.speed_level == 2
    assert session.interval_ms == 198


def test_game_over_stops_timer():
    async def scenario():
        session = GameSession(rng=random.Random(0))
        session.start()
        session.state = replace(session.state, snake=((15, 2), (14, 2)))
        session.tick()
        assert session.state.status == Status.GAMEOVER
        assert not session.running

    asyncio.run(scenario())


def test_timer_pushes_updates():
    updates = []

    async def record(state):
        updates.append(state)

    async def scenario():
        session = GameSession(rng=random.Random(0), on_update=record)
        session.start()
        session.interval_ms = 1
        await asyncio.sleep(0.1)
        session.stop()

    asyncio.run(scenario())
    assert updates
    assert updates[0].status in (Status.RUNNING, Status.GAMEOVER)


def test_keys_drive_session():
    async def scenario():
        session = GameSession(rng=random.Random(0))
        session.handle_key("Enter")
        assert session.running
        first = session.state

        session.handle_key("ArrowUp")
        assert session.state.next_direction == "up"
        session.handle_key("s")
        assert session.state.next_direction == "down"

        # start key is ignored while a game is running
        session.handle_key(" ")
        assert session.state.snake == first.snake

        session.handle_key("R")
        assert session.running
        assert session.state.next_direction == "right"
        session.stop()

    asyncio.run(scenario())


def test_restart_during_game_over_push_keeps_one_tick_loop():
    tickers = set()
    restarted_from = []

    async def scenario():
        async def restart_on_game_over(state):
            tickers.add(asyncio.current_task())
            if state.status == Status.GAMEOVER and not restarted_from:
                restarted_from.append(asyncio.current_task())
                session.start()
                session.interval_ms = 1
                await asyncio.sleep(0.01)

        session = GameSession(rng=random.Random(0), on_update=restart_on_game_over)
        session.start()
        session.interval_ms = 1
        session.state = replace(session.state, snake=((15, 2), (14, 2)))
        await asyncio.sleep(0.25)

        old_loop = restarted_from[0]
        assert old_loop.done()
        assert len(tickers) == 2
        session.stop()

    asyncio.run(scenario())


def test_failed_update_is_logged(caplog):
    async def broken(state):
        raise ValueError("socket gone")

    async def scenario():
        session = GameSession(rng=random.Random(0), on_update=broken)
        session.start()
        session.interval_ms = 1
        await asyncio.sleep(0.05)
        assert not session.running

    with caplog.at_level("ERROR", logger="season_snake.session"):
        asyncio.run(scenario())
    assert "Tick loop failed" in caplog.text
