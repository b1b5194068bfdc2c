"""
Tests for night actions and the night phase handler.
"""

import random

import pytest
from mafia_engine.core import (
    GamePhase, Judge, RoleType, PlayerRegistry, NIGHT_ACTIONS, DoctorActor, create_actor,
    heal, attack, investigate, perform_night_action,
)
from mafia_engine.phases import NightPhaseHandler


def test_attack_kills_first_eligible(registry, first_rng):
    killed = attack(registry, first_rng)

    assert killed == 1
    assert not registry.by_id(1).is_alive


def test_attack_skips_mafia_and_dead(registry, last_rng):
    registry.by_id(6).eliminate()

    killed = attack(registry, last_rng)

    # 6 is already dead, so the last eligible seat is 5
    assert killed == 5


def test_attack_never_targets_mafia_across_seeds():
    """Attack only ever kills alive non-mafia players."""
    for seed in range(200):
        rng = random.Random(seed)
        registry = PlayerRegistry.create(6, mafia_seat=3)
        while True:
            alive_before = {p.player_id for p in registry.all_alive()}
            killed = attack(registry, rng)
            if killed is None:
                break
            assert killed in alive_before
            assert registry.by_id(killed).role != RoleType.MAFIA
            assert not registry.by_id(killed).is_alive

        # Only the mafia is left standing
        assert [p.player_id for p in registry.all_alive()] == [3]


def test_attack_with_no_targets(registry, first_rng):
    for player in registry:
        if player.role != RoleType.MAFIA:
            player.eliminate()

    assert attack(registry, first_rng) is None
    assert registry.by_id(3).is_alive


def test_heal_with_nobody_dead(registry, first_rng):
    """Heal is a no-op when no one is dead."""
    assert heal(registry, first_rng) is None
    assert len(registry.all_alive()) == 6


def test_heal_revives_only_dead_players():
    for seed in range(50):
        registry = PlayerRegistry.create(6, mafia_seat=3)
        registry.by_id(2).eliminate()
        registry.by_id(5).eliminate()

        saved = heal(registry, random.Random(seed))

        assert saved in (2, 5)
        assert registry.by_id(saved).is_alive
        assert len(registry.dead()) == 1


def test_heal_reverses_attack(registry, first_rng):
    killed = attack(registry, first_rng)
    saved = heal(registry, first_rng)

    assert saved == killed
    assert len(registry.all_alive()) == 6


def test_investigate_finds_mafia(registry, first_rng):
    assert investigate(registry, first_rng) == 3


def test_investigate_does_not_mutate(registry, first_rng):
    before = [(p.player_id, p.status, p.role, p.vote, p.vote_count) for p in registry]
    investigate(registry, first_rng)
    after = [(p.player_id, p.status, p.role, p.vote, p.vote_count) for p in registry]
    assert before == after


def test_investigate_ignores_dead_mafia(registry, first_rng):
    registry.by_id(3).eliminate()
    assert investigate(registry, first_rng) is None


def test_investigate_never_reveals_police(doctor_police_registry, first_rng):
    """Police and dead players are never reported as found."""
    assert investigate(doctor_police_registry, first_rng) == 5

    doctor_police_registry.by_id(5).eliminate()
    assert investigate(doctor_police_registry, first_rng) is None


def test_attack_can_target_doctor_and_police(doctor_police_registry, first_rng):
    assert attack(doctor_police_registry, first_rng) == 1
    assert attack(doctor_police_registry, first_rng) == 2


def test_night_action_dispatch(registry, first_rng):
    assert set(NIGHT_ACTIONS) == {RoleType.DOCTOR, RoleType.MAFIA, RoleType.POLICE}
    assert perform_night_action(RoleType.MAFIA, registry, first_rng) == 1
    assert perform_night_action(RoleType.DOCTOR, registry, first_rng) == 1
    assert perform_night_action(RoleType.POLICE, registry, first_rng) == 3

    with pytest.raises(ValueError):
        perform_night_action(RoleType.CIVILIAN, registry, first_rng)


def test_run_night_phase(game_state, game_config):
    """Doctor, Mafia and Police each act once, in that order."""
    handler = NightPhaseHandler(game_state, Judge(game_state, game_config))

    outcomes = handler.run_night_phase()

    assert list(outcomes) == [RoleType.DOCTOR, RoleType.MAFIA, RoleType.POLICE]
    # Nobody was dead when the doctor woke up
    assert outcomes[RoleType.DOCTOR] is None
    killed = outcomes[RoleType.MAFIA]
    assert killed is not None and killed != 3
    assert not game_state.get_player(killed).is_alive
    assert outcomes[RoleType.POLICE] == 3

    assert game_state.saved_player is None
    assert game_state.killed_player == killed
    assert game_state.found_mafia == 3


def test_run_night_phase_custom_order(game_state, game_config):
    """Attack before heal lets the doctor revive the victim."""
    handler = NightPhaseHandler(game_state, Judge(game_state, game_config))

    outcomes = handler.run_night_phase(order=[RoleType.MAFIA, RoleType.DOCTOR])

    assert outcomes[RoleType.DOCTOR] == outcomes[RoleType.MAFIA]
    assert len(game_state.get_alive_players()) == 6


def test_night_phase_stops_when_game_ends(new_game_state, game_config):
    """A kill that leaves no civilian ends the night."""
    new_game_state.start_game(4)
    for player_id in (1, 2):
        new_game_state.get_player(player_id).eliminate()
    handler = NightPhaseHandler(new_game_state, Judge(new_game_state, game_config))

    outcomes = handler.run_night_phase(order=[RoleType.MAFIA, RoleType.DOCTOR, RoleType.POLICE])

    assert outcomes == {RoleType.MAFIA: 4}
    assert new_game_state.phase == GamePhase.GAME_OVER


def test_night_actors_hold_their_own_outcome():
    doctor = create_actor(RoleType.DOCTOR)
    doctor.outcome = 4

    assert isinstance(doctor, DoctorActor)
    assert doctor.saved_player == 4
    assert create_actor(RoleType.MAFIA).killed_player is None
    assert create_actor(RoleType.POLICE).found_mafia is None

    with pytest.raises(ValueError):
        create_actor(RoleType.CIVILIAN)
