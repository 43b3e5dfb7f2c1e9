from pydantic import BaseModel


class Participant(BaseModel):
    """Equipo inscrito en la quiniela (una fila de la hoja de teams)"""

    team_id: str
    team_name: str
    contact: str = ""
    paid: bool = False

    class Config:
        frozen = True
