# structkit

Plain-Python implementations of classic data structures and algorithms:

- `structkit.linked_list.LinkedList`: a singly linked list with a tail reference
- `structkit.double_linked_list.DoubleLinkedList`: a doubly linked list that can be walked in both directions
- `structkit.linked_queue.LinkedQueue`: a FIFO queue built on `DoubleLinkedList`
- `structkit.binary_heap.BinaryHeap`: a binary min-heap ordered by a comparison function
- `structkit.avl_tree.AVLTree`: a self-balancing binary search tree of unique elements. Its nodes are `structkit.avl_node.AVLNode`.
- `structkit.sorting`: `bubble_sort`, `bubble_sort_early_exit`, `insertion_sort`, `quick_sort` and `selection_sort`
- `structkit.searching`: `binary_search` and `search_insert_position`

The package is a library only. It has no command-line program.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Comparison functions

`BinaryHeap`, `AVLTree` and the `remove_all` method of both list types
take an optional three-way comparison function. It is called as
`compare(a, b)` and returns a negative number when `a` orders before `b`,
zero when they are equal, and a positive number otherwise:

```python
def compare(a, b):
    return a - b
```

If you leave it out, the heap and the tree use the elements' own `<` and
`>`, and `remove_all` uses `==`.

## Examples

```python
from structkit.linked_list import LinkedList
from structkit.double_linked_list import DoubleLinkedList
from structkit.linked_queue import LinkedQueue
from structkit.binary_heap import BinaryHeap
from structkit.avl_tree import AVLTree
from structkit.sorting import quick_sort
from structkit.searching import binary_search, search_insert_position

items = LinkedList([11, 11, 22, 33])
items.remove_all(11, lambda a, b: a - b)   # 2
list(items)                  # [22, 33]

dl = DoubleLinkedList([11, 22])
dl.push_front(11)
dl.insert(2, 666)
list(dl)                     # [11, 11, 666, 22]
list(reversed(dl))           # [22, 666, 11, 11]
dl.first(), dl.last()        # (11, 22)

queue = LinkedQueue([1, 2, 3])
queue.pop()                  # 1
queue.front()                # 2
queue.rear()                 # 3

heap = BinaryHeap(lambda a, b: a - b)
for n in (23, 54, 7, 16, 3, 41):
    heap.push(n)
heap.pop()                   # 3
heap.peek()                  # 7

tree = AVLTree(lambda a, b: a - b)
for n in (13, 14, 46):
    tree.insert(n)
tree.insert(14)              # False: already present
tree.height()                # 2
list(tree.level_order())     # [14, 13, 46]
list(tree.inorder())         # [13, 14, 46]
14 in tree                   # True
print(tree.render(str))      # right subtree on top, 4 spaces per level

nums = [31, 47, 25, 16, 4, 35, 38]
ordered = quick_sort(nums)   # [4, 16, 25, 31, 35, 38, 47]; nums is unchanged
binary_search(ordered, 35)   # 4
binary_search(ordered, 5)    # -1
search_insert_position([3, 4, 4, 4, 5, 6, 8, 9], 7)   # 6
```

## Behaviour worth knowing

- Every sort function accepts any iterable and returns a new ascending list;
  it does not change its argument. `insertion_sort` keeps equal items in
  their original order.
- `search_insert_position` returns the index after any items equal to the
  target.
- In the lists, a position out of range raises `IndexError`, as does
  popping or reading from an empty list. `LinkedQueue.pop`, `front` and
  `rear` and `BinaryHeap.pop` and `peek` raise `IndexError` when empty.
- `AVLTree.insert` and `AVLTree.remove` return `True` or `False` rather than
  raising: `False` when the element is already present or not found.

## Running the tests

```
pytest
```