from attrs import define, field, validators

from .generators.doubles import LARGE_GROUP_ROUND_CAP


@define
class SchedulerConfig:
    """Tuning parameters of the `PairingScheduler`.

    :param default_courts:          Courts used when a caller does not say how many are available.
    :param large_group_round_cap:   Upper bound on the rounds of the rotation used for doubles with 12 or more players.
    :param seed:                    Seed of the random generator used for the player to position mapping. `None` draws
                                    fresh entropy, which is what you want outside of tests.
    """
    default_courts: int = field(default=2, validator=[validators.instance_of(int), validators.ge(1)])
    large_group_round_cap: int = field(default=LARGE_GROUP_ROUND_CAP,
                                       validator=[validators.instance_of(int), validators.ge(1)])
    seed: int | None = field(default=None, validator=validators.optional(validators.instance_of(int)))
