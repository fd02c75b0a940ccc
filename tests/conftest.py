from pytest import Item, fixture

from scicalc.angle import AngleMode
from scicalc.engine import Engine


@fixture
def engine():
    '''
    Fresh session, degrees and normal display.
    '''
    return Engine()


@fixture
def radians():
    return Engine(angle=AngleMode.RADIANS)


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every passing assertion, so an audit can see what was evaluated.

    Only fires with enable_assertion_pass_hook set; read with pytest -rP.
    '''
    print('checked', item.name + ':' + str(lineno), str(orig))
