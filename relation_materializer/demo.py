import logging

from relation_materializer.config.settings import configure_logging, settings
from relation_materializer.entity_types.access import Access
from relation_materializer.entity_types.house import House
from relation_materializer.entity_types.person import Person
from relation_materializer.materializer.materializer import materialize_people_houses
from relation_materializer.materializer.relation_views import RelationViews
from relation_materializer.materializer.rendering import render_views

logger = logging.getLogger(__name__)

PEOPLE = [
    Person(id=1, name="Victor", last_name="RM"),
    Person(id=2, name="Pepe", last_name="Smith"),
    Person(id=3, name="Juana", last_name="Santos"),
]

HOUSES = [
    House(id=1, address="Street 1", code="code1"),
    House(id=2, address="Street 2", code="code2"),
    House(id=3, address="Street 3", code="code3"),
]

ACCESSES = [
    Access(person_id=1, house_id=1),
    Access(person_id=1, house_id=2),
    Access(person_id=2, house_id=2),
    Access(person_id=3, house_id=3),
]


def demo_views() -> RelationViews:
    return materialize_people_houses(PEOPLE, HOUSES, ACCESSES)


def main() -> None:
    configure_logging(settings)
    logger.info("materializing %d accesses (env=%s)", len(ACCESSES), settings.app_env)
    print(render_views(demo_views()))


if __name__ == "__main__":
    main()
