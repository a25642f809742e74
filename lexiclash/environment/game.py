import logging
import random
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..board import GenerationResult, Grid, generate
from .models import PlayerResult, RoundConfig, RoundResult, SubmissionResult
from .player import PlayerSession


log = logging.getLogger("lexiclash.round")


class GameRound(BaseModel):
    """
    Runs one round: a generated grid and the sessions of its players.

    Handles board generation, resets every player's combo at round start,
    routes submissions to the right session, and builds the leaderboard.

    Attributes:
        config: Round configuration
        generation: The board generation result for this round
        players: Player sessions keyed by player id
        started_at: Round start time in seconds, set by start()
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: RoundConfig
    generation: GenerationResult
    players: Dict[str, PlayerSession] = Field(default_factory=dict)
    started_at: Optional[float] = None

    @classmethod
    def create(cls, config: Optional[RoundConfig] = None, rng: Optional[random.Random] = None) -> "GameRound":
        """
        Factory method to create a round with a fresh grid and its players.

        Args:
            config: Round configuration (defaults to RoundConfig())
            rng: Random source for generation; seeded from `config.seed` when omitted

        Returns:
            A new GameRound, not yet started

        Raises:
            UnsupportedLanguage: If the configured language is unknown
        """
        config = config or RoundConfig()
        if rng is None:
            rng = random.Random(config.seed)

        generation = generate(
            config.rows,
            config.cols,
            config.language,
            config.words_to_embed,
            rng=rng,
        )

        players = {}
        for i, name in enumerate(config.players):
            player_id = f"p{i+1}"
            players[player_id] = PlayerSession(
                player_id=player_id,
                name=name,
                language=config.language,
                min_word_length=config.min_word_length,
            )

        log.info(
            "Created %dx%d %s round for %d player(s), %d word(s) embedded",
            config.rows, config.cols, config.language, len(players), len(generation.placements),
        )
        return cls(config=config, generation=generation, players=players)

    @property
    def grid(self) -> Grid:
        return self.generation.grid

    @property
    def ends_at(self) -> Optional[float]:
        if self.started_at is None:
            return None
        return self.started_at + self.config.duration_seconds

    def start(self, now: float) -> None:
        """Start the round clock and reset every player's state."""
        self.started_at = now
        for player in self.players.values():
            player.start_round()

    def is_over(self, now: float) -> bool:
        """True once the round timer has run out."""
        ends_at = self.ends_at
        return ends_at is not None and now >= ends_at

    def submit(self, player_id: str, word: str, now: float, auto_validated: bool = True) -> SubmissionResult:
        """
        Submit a word for a player.

        Raises:
            KeyError: If the player is not in this round
            ValueError: If the round has not started or is already over
        """
        if self.started_at is None:
            raise ValueError("Round has not started")
        if self.is_over(now):
            raise ValueError("Round is over")
        return self.players[player_id].submit(word, self.grid, now, auto_validated)

    def leaderboard(self) -> List[PlayerResult]:
        """Player standings, highest score first."""
        results = [
            PlayerResult(
                player_id=p.player_id,
                name=p.name,
                score=p.score,
                words=list(p.found_words),
                best_combo=p.best_combo,
            )
            for p in self.players.values()
        ]
        return sorted(results, key=lambda r: (-r.score, r.player_id))

    def get_result(self) -> RoundResult:
        """Snapshot of the round for serialization."""
        leaderboard = self.leaderboard()
        winner = None
        if leaderboard and leaderboard[0].score > 0:
            winner = leaderboard[0].name

        submissions = [s for p in self.players.values() for s in p.history]
        submissions.sort(key=lambda s: s.submitted_at)

        return RoundResult(
            config=self.config,
            grid=self.grid.to_lists(),
            embedded_words=self.generation.embedded_words,
            leaderboard=leaderboard,
            submissions=submissions,
            winner=winner,
        )
