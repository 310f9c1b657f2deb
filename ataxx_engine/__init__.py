"""
Ataxx Engine

An Ataxx board engine with a minimax/alpha-beta player and a console driver.

## Architecture

The engine is organized into several key modules:

1. **board**: Rules engine
   - 7x7 board inside a 2-deep blocked border (no bounds checks)
   - Legality, make/undo with full snapshots, symmetric blocks
   - Game over: wipe-out, no moves for either side, jump limit

2. **evaluation**: Position evaluation functions
   - Abstract Evaluator interface (swappable design)
   - MaterialEvaluator: Red pieces minus Blue pieces

3. **search**: Search algorithms
   - Minimax with alpha-beta pruning to a fixed depth (4 plies)
   - Earliest strictly-best move wins ties

4. **players**: Move sources
   - AIPlayer: search-driven
   - ManualPlayer: moves supplied from outside

5. **game**: Console session
   - Text commands (setup, start, moves, dump, ...)
   - Setup / playing / finished states

6. **utils**: Reference games shared by tests and tools

## Quick Start

### As a Python Library

```python
from ataxx_engine.board import Board, Move
from ataxx_engine.search import find_best_move

board = Board()
board.make_move(Move.parse("a7-b6"))

best_move, score, nodes = find_best_move(board, depth=4)
print(f"Best move for {board.whose_move}: {best_move} (score: {score})")
```

### On the Console

```bash
python -m ataxx_engine.game --red manual --blue auto
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from ataxx_engine.board import Board, Move, PieceColor, GameError
from ataxx_engine.evaluation import Evaluator, MaterialEvaluator
from ataxx_engine.search import find_best_move, minimax
from ataxx_engine.players import Player, AIPlayer, ManualPlayer

__all__ = [
    'Board',
    'Move',
    'PieceColor',
    'GameError',
    'Evaluator',
    'MaterialEvaluator',
    'find_best_move',
    'minimax',
    'Player',
    'AIPlayer',
    'ManualPlayer',
]
