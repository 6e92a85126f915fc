import pytest

from secrets_api_client.cli.cqrs import Event, EventHandler, Mediator


class FakeEvent(Event):
    handled = False


class Event1(FakeEvent):
    pass


class Event2(FakeEvent):
    pass


class FakeHandler(EventHandler):
    def handle(self, event: FakeEvent, mediator: Mediator):
        event.handled = True
        return "handled"


@pytest.fixture
def mediator():
    return Mediator({Event1: FakeHandler})


class TestMediator:
    def test_add_handler(self, mediator):
        assert mediator.handlers[Event1] is FakeHandler

    def test_add_multiple_handlers(self):
        mediator = Mediator()
        mediator.add_handlers({Event1: FakeHandler, Event2: FakeHandler})
        assert mediator.handlers[Event1] is FakeHandler
        assert mediator.handlers[Event2] is FakeHandler

    def test_raises_on_conflicting_handler(self, mediator):
        with pytest.raises(ValueError):
            mediator.add_handler(Event1, FakeHandler)

    def test_raises_on_unknown_event(self, mediator):
        with pytest.raises(TypeError):
            mediator.send(Event2())

    def test_runs_handler_with_event(self, mediator):
        event = Event1()
        assert mediator.send(event) == "handled"
        assert event.handled

    def test_injects_dependencies(self, gimme_repo):
        class MyService:
            def __init__(self) -> None:
                self.events = []

        service = MyService()
        gimme_repo.add(service)

        class MyHandler(EventHandler):
            def __init__(self, service: MyService) -> None:
                self.service = service

            def handle(self, event, mediator):
                self.service.events.append(event)

        mediator = Mediator({Event1: MyHandler})

        event = Event1()
        mediator.send(event)
        assert event in service.events
