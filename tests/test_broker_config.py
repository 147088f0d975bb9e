from unittest import TestCase

from modesync.validators import broker_config
from modesync.validators.types import ModeDefinition


def _mode(name: str, channel: str, topic: str) -> ModeDefinition:
    return ModeDefinition(
        name=name,
        ui_button_id=f"{name}Btn",
        ui_button_text=name,
        backend_mode=name,
        broker_topic=topic,
        event_type=topic,
        emitter_channel=channel,
    )


PROPERTIES = """
# outgoing
mp.messaging.outgoing.ch-a.connector=smallrye-kafka
mp.messaging.outgoing.ch-a.topic=topic-x
mp.messaging.outgoing.ch-b.topic : topic-b
#mp.messaging.outgoing.ch-c.topic=topic-c
mp.messaging.incoming.ch-d.topic=topic-d
"""


class BrokerBindingParseTests(TestCase):
    def test_parses_outgoing_attributes_only(self) -> None:
        bindings = broker_config.parse_outgoing_bindings(PROPERTIES)
        self.assertEqual(
            bindings,
            {
                "ch-a": {"connector": "smallrye-kafka", "topic": "topic-x"},
                "ch-b": {"topic": "topic-b"},
            },
        )

    def test_later_declaration_wins(self) -> None:
        text = PROPERTIES + "mp.messaging.outgoing.ch-a.topic=topic-y\n"
        self.assertEqual(broker_config.parse_outgoing_bindings(text)["ch-a"]["topic"], "topic-y")


class BrokerExtractionTests(TestCase):
    def test_matching_topic(self) -> None:
        results = broker_config.extract(_mode("b", "ch-b", "topic-b"), PROPERTIES)
        self.assertTrue(all(r.matches for r in results))

    def test_channel_bound_to_other_topic(self) -> None:
        results = broker_config.extract(_mode("a", "ch-a", "topic-y"), PROPERTIES)
        self.assertTrue(results[0].matches)
        self.assertEqual(results[1].value, "topic-x")
        self.assertFalse(results[1].matches)

    def test_commented_channel_is_missing(self) -> None:
        results = broker_config.extract(_mode("c", "ch-c", "topic-c"), PROPERTIES)
        self.assertEqual(len(results), 1)
        self.assertFalse(results[0].found)

    def test_channel_without_topic_is_absent(self) -> None:
        text = "mp.messaging.outgoing.ch-e.connector=smallrye-kafka\n"
        results = broker_config.extract(_mode("e", "ch-e", "topic-e"), text)
        self.assertTrue(results[0].found)
        self.assertFalse(results[1].found)

    def test_profile_only_channel_is_declared(self) -> None:
        text = "%prod.mp.messaging.outgoing.genetic-data-raw-out.topic=genetic-data-raw\n"
        results = broker_config.extract(_mode("normal", "genetic-data-raw-out", "genetic-data-raw"), text)
        self.assertEqual([r.field for r in results], ["emitter_channel", "broker_topic"])
        self.assertTrue(all(r.matches for r in results))

    def test_unprefixed_topic_wins_over_profile(self) -> None:
        text = (
            "%dev.mp.messaging.outgoing.ch-a.topic=dev-topic\n"
            "mp.messaging.outgoing.ch-a.topic=topic-a\n"
            "%test.mp.messaging.outgoing.ch-a.connector=smallrye-in-memory\n"
        )
        self.assertEqual(
            broker_config.parse_outgoing_bindings(text),
            {"ch-a": {"topic": "topic-a", "connector": "smallrye-in-memory"}},
        )
