import logging
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI
from pydantic import BaseModel, Field

from relation_materializer.config.settings import configure_logging, settings
from relation_materializer.demo import demo_views
from relation_materializer.entity_types.access import Access
from relation_materializer.entity_types.house import House
from relation_materializer.entity_types.person import Person
from relation_materializer.materializer.materializer import materialize_people_houses
from relation_materializer.materializer.relation_views import RelationViews

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings)
    yield


app = FastAPI(title=settings.app_title, version="0.1.0", lifespan=lifespan)

# --- Pydantic DTOs -------------------------------------------------------------
class PersonDTO(BaseModel):
    id: int = Field(..., description="Unique person id")
    name: str
    last_name: str

class HouseDTO(BaseModel):
    id: int = Field(..., description="Unique house id")
    address: str
    code: str

class AccessDTO(BaseModel):
    person_id: int
    house_id: int

class MaterializeRequest(BaseModel):
    people: list[PersonDTO] = []
    houses: list[HouseDTO] = []
    accesses: list[AccessDTO] = []

class PersonHouses(BaseModel):
    person: PersonDTO
    houses: list[HouseDTO]

class HousePeople(BaseModel):
    house: HouseDTO
    people: list[PersonDTO]

class MaterializeResponse(BaseModel):
    people_to_houses: list[PersonHouses]
    houses_to_people: list[HousePeople]

# --- Helpers -------------------------------------------------------------------
def to_response(views: RelationViews) -> MaterializeResponse:
    # lists keep the view ordering, which a JSON object keyed by id would not
    return MaterializeResponse(
        people_to_houses=[
            PersonHouses(
                person=PersonDTO(**asdict(person)),
                houses=[HouseDTO(**asdict(h)) for h in houses],
            )
            for person, houses in views.forward.items()
        ],
        houses_to_people=[
            HousePeople(
                house=HouseDTO(**asdict(house)),
                people=[PersonDTO(**asdict(p)) for p in people],
            )
            for house, people in views.reverse.items()
        ],
    )

# --- Routes --------------------------------------------------------------------
@app.post("/materialize/people-houses", response_model=MaterializeResponse)
def materialize_people_houses_route(req: MaterializeRequest):
    views = materialize_people_houses(
        [Person(**p.model_dump()) for p in req.people],
        [House(**h.model_dump()) for h in req.houses],
        [Access(**a.model_dump()) for a in req.accesses],
    )
    logger.info(
        "materialized %d people and %d houses from %d accesses",
        len(views.forward), len(views.reverse), len(req.accesses),
    )
    return to_response(views)


@app.get("/demo", response_model=MaterializeResponse)
def demo():
    return to_response(demo_views())

# To run:
#   uvicorn relation_materializer.app:app --reload
