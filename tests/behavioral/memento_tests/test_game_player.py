import dataclasses

import pytest
from behavioral.memento.game_player import GameHistory, Player


@pytest.mark.unit
def test_undo_restores_saved_states_in_reverse():
    player = Player()
    history = GameHistory()
    assert player.status() == "Level: 1, Task: Tutorial, Score: 0"

    player.play(2, "Find the key", 100)
    history.push(player.save())
    player.play(3, "Defeat the boss", 250)
    history.push(player.save())
    player.play(4, "Collect treasures", 400)

    player.restore(history.pop())
    assert player.status() == "Level: 3, Task: Defeat the boss, Score: 250"
    player.restore(history.pop())
    assert player.status() == "Level: 2, Task: Find the key, Score: 100"
    assert history.pop() is None


@pytest.mark.unit
def test_memento_is_immutable():
    memento = Player().save()
    with pytest.raises(dataclasses.FrozenInstanceError):
        memento.score = 10
