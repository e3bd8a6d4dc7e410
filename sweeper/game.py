from __future__ import annotations
import logging
import sys
from typing import TextIO, Optional

from sweeper.commands import Command, Verb, read_command
from sweeper.engine import Board, RevealOutcome
from sweeper.render import render_board

logger = logging.getLogger(__name__)

GAME_OVER_HINT = "Game over! Start a new game with n, or q to quit."


class ConsoleGame:
    """Turn loop: check for a win, render, read one command, apply it."""

    def __init__(self, board: Board, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.board = board
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def say(self, text: str) -> None:
        print(text, file=self.stdout)

    def run(self) -> int:
        board = self.board
        while True:
            board.elapsed_turns += 1
            if board.check_win():
                self.say("You win!")
            self.say(render_board(board))
            if board.game_over:
                self.say("Game over!")

            command = self._next_command()
            if command.verb is Verb.QUIT:
                return 0
            self.apply(command)

    def _next_command(self) -> Command:
        while True:
            command = read_command(self.board, self.stdin, self.stdout)
            if self.board.game_over and command.verb in (Verb.REVEAL, Verb.FLAG):
                self.say(GAME_OVER_HINT)
                continue
            return command

    def apply(self, command: Command) -> None:
        board = self.board
        if command.verb is Verb.NEW:
            try:
                board.new_game(command.x, command.y)
            except ValueError as error:
                logger.warning("new game rejected: %s", error)
                self.say(f"Cannot start new game: {error}")
        elif command.verb is Verb.REVEAL:
            outcome = board.reveal(command.x, command.y)
            if outcome is RevealOutcome.BAD_CHORD:
                self.say("Incorrect number of flags")
        elif command.verb is Verb.FLAG:
            board.toggle_flag(command.x, command.y)
