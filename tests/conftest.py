from pytest import fixture

from rpncalc.engine import Engine
from rpncalc.dispatcher import Dispatcher


@fixture
def engine() -> Engine:
    '''
    Fresh engine, radians, default log size.
    '''
    return Engine()


@fixture
def dispatcher(engine: Engine) -> Dispatcher:
    '''
    Dispatcher driving the engine fixture, so tests can inspect either.
    '''
    return Dispatcher(engine)