# graphquest

A small terminal adventure game. The world is a graph of scenarios (rooms)
read from a CSV file. Each scenario has a name, a description, items worth
points, links up, down, left and right to other scenarios, and a flag that
marks it as final. The menus and messages are in Spanish.

## Installing

```
pip install .
```

## Playing

```
graphquest
graphquest --data path/to/scenarios.csv
```

Without `--data` the game reads `Data/graphquest.csv` from the current
directory. The main menu offers:

1. Leer escenarios: read the CSV file, print every scenario in it and place
   the player in the scenario with id `1`, with 100 units of time.
2. Iniciar partida: play turns from the current scenario.
3. Salir: quit. The game also quits when input ends.

Each turn shows the time left, the total weight carried, the score, the
current scenario with its description and items, and the inventory, then
the turn menu:

- `1` Recoger item: spends 10 units of time.
- `4` Reiniciar partida: reads the CSV file again and starts over from
  scenario `1`.
- `5` Salir: back to the main menu.

When the current scenario is final, the game prints the score, time left,
weight and inventory, and clears the player's progress. The scenarios must
then be read again (option 1 of the main menu) before the next game.

## What the game does not do

- Picking up an item only costs time: the item stays in the scenario and
  the score, weight and inventory do not change.
- Turn options `2` (Descartar item) and `3` (Avanzar en escenario) are shown
  but do nothing, so the player cannot drop items or move to another
  scenario. The links between scenarios are read and kept, but not walked.

## Scenario file

The CSV file begins with a header line. Each line after it has these fields:

```
id,name,description,items,up,down,left,right,is_final
```

- `items` is a `;`-separated list of `name,value,weight` entries. Wrap the
  field in double quotes, because it contains commas; `""` inside quotes is
  a literal quote.
- The link fields hold a scenario id, or `-1` when there is no link.
- `is_final` is `Si` for a final scenario.
- Blank lines are skipped; a line with fewer than nine fields raises
  `ValueError`. When an id appears twice, its first line is kept.

Example:

```
id,name,description,items,up,down,left,right,is_final
1,Entrance,A dusty hall,"Key,5,1;Lamp,3,2",-1,2,-1,-1,No
2,Exit,The way out,,1,-1,-1,-1,Si
```

## Using it as a library

```python
import io

from graphquest.game import Game, load_scenarios

with open("Data/graphquest.csv", encoding="utf-8") as stream:
    scenarios = load_scenarios(stream)
for scenario in scenarios:
    print(scenario.id, scenario.name, scenario.is_final,
          {d: s and s.id for d, s in scenario.connections.items()})

out = io.StringIO()
game = Game("Data/graphquest.csv", input_func=lambda: "", output=out)
game.load()
print(game.status_text())
```

`load_scenarios` returns `Scenario` objects whose `connections` map
`"up"`, `"down"`, `"left"` and `"right"` to the linked scenario or `None`.
`Game` takes the path of the CSV file, a function that returns one line of
input, and a text stream for output; `load`, `play` and `run` drive the
menus, `pick_item` and `reset` change the `Player` state, and `status_text`
returns the turn screen. `parse_items` and `format_item` read and describe
`Item` entries.

`graphquest.csvtools` has the CSV line parser (`parse_csv_line`,
`read_csv_rows`) and `split_string`, which splits on any of a set of
delimiter characters, drops empty tokens and trims spaces.
`graphquest.hashmap.HashMap` is the open-addressing table with linear
probing that the game keeps its scenarios in; inserting a key that is
already present leaves the stored value unchanged, and the table doubles its
capacity when full.

## Tests

```
pip install .[test]
pytest
```