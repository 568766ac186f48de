"""Rule configuration for scoring and settlement."""


class ScoringConfig:
    """Scoring configuration."""

    def __init__(
        self,
        deposit_score: int = 1000,    # Riichi deposit stick (供託)
        streak_score: int = 300,      # Per streak count (積み棒)
        drawn_pot: int = 3000,        # Exhaustive draw pot (不聴罰符)
        open_all_simples: bool = True,  # 喰いタン
        stack_limits: bool = True,    # Multiple limit hands add up
        counted_limit: bool = True,   # 13+ han counts as a limit hand (数え役満)
        red_fives: bool = True,       # Red fives are bonus tiles
    ):
        if deposit_score < 0 or streak_score < 0 or drawn_pot < 0:
            raise ValueError("scores in the configuration must not be negative")
        if drawn_pot % 6:
            # Split among one to three seats on either side
            raise ValueError(f"drawn_pot must divide evenly by 1, 2 and 3, got {drawn_pot}")
        self.deposit_score = deposit_score
        self.streak_score = streak_score
        self.drawn_pot = drawn_pot
        self.open_all_simples = open_all_simples
        self.stack_limits = stack_limits
        self.counted_limit = counted_limit
        self.red_fives = red_fives

    def to_dict(self) -> dict:
        return dict(vars(self))


DEFAULT_CONFIG = ScoringConfig()
