# dsakit

A small collection of classic algorithm exercises with a plain Python interface:
conversion between arithmetic notations, enumeration of paths through a maze, and
queries and traversals over binary trees. It has no dependencies outside the
standard library.

## Installation

```
pip install dsakit
```

## Expression notation

`dsakit.notation` converts between infix, postfix and prefix forms. Operands are
single ASCII letters or digits. Operators are `+ - * / ^`.

```python
from dsakit.notation import (
    infix_to_postfix,
    postfix_to_prefix,
    prefix_to_infix,
    prefix_to_postfix,
)

infix_to_postfix("a+b*c")        # "abc*+"
infix_to_postfix("(a+b)*c")      # "ab+c*"
postfix_to_prefix("abc*+")       # "+a*bc"
prefix_to_infix("*+abc")         # "((a+b)*c)"
prefix_to_postfix("*+abc")       # "ab+c*"
```

Precedence from highest to lowest is `^`, then `*` and `/`, then `+` and `-`.
`^` is right-associative and the other operators are left-associative.
`prefix_to_infix` wraps every operation in parentheses.

`is_operand(ch)` and `is_operator(ch)` classify single characters, and
`OPERATORS` is the set of operator characters.

Malformed input raises `ValueError`: a `)` with no matching `(` in
`infix_to_postfix`, and, in the other conversions, an operator without two
operands or an empty expression.

## Rat in a maze

`dsakit.maze.find_paths(grid)` lists every path from the top-left cell to the
bottom-right cell of a square grid. A cell holding `1` is open and a cell holding
`0` is blocked. A path is a string of moves: `D` (down), `U` (up), `R` (right) and
`L` (left), and paths come back in the order the search tries the moves (down,
up, right, left). No cell is visited twice on the same path. A grid whose rows
are not all as long as the grid is tall raises `ValueError`.

```python
from dsakit.maze import find_paths

grid = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]
find_paths(grid)  # ["DDRDRR", "DRDDRR"]
```

## Binary trees

`dsakit.trees` provides a `TreeNode` type (`val`, `left`, `right`) and functions
that work on trees built from it. An empty tree is `None`. The functions walk the
tree without recursion, so long chains do not hit the recursion limit.

```python
from dsakit.trees import (
    TreeNode,
    max_depth,
    is_balanced,
    diameter,
    is_same_tree,
    inorder,
    preorder,
    zigzag_level_order,
)

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))

max_depth(root)            # 3  (nodes on the longest root-to-leaf path)
is_balanced(root)          # True
diameter(root)             # 3  (edges on the longest path between two nodes)
inorder(root)              # [9, 3, 15, 20, 7]
preorder(root)             # [3, 9, 20, 15, 7]
zigzag_level_order(root)   # [[3], [20, 9], [15, 7]]
is_same_tree(root, root)   # True
```

`is_same_tree(p, q)` compares shape and values; `TreeNode` itself compares by
identity.

## What it does not do

dsakit is a library only. It has no command-line program; the functions are
meant to be imported and called.

## Running the tests

```
pip install "dsakit[test]"
pytest
```