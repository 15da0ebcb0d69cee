"""
Tests pour les modeles SQLModel.
"""

from sqlmodel import select

from src.infrastructure.persistence.models import MovieModel


class TestMovieModel:
    """Tests pour MovieModel."""

    def test_defaults(self):
        model = MovieModel(name="Alien", year=1979)
        assert model.director == ""
        assert model.actors == []
        assert model.format == "Digital"
        assert model.created_at is not None

    def test_timestamps_are_timezone_aware(self):
        model = MovieModel(name="Alien", year=1979)
        assert model.created_at.tzinfo is not None
        assert model.updated_at.tzinfo is not None

    def test_actors_property_serializes_json(self):
        model = MovieModel(name="Heat", year=1995)
        model.actors = ["Al Pacino", "Robert De Niro"]
        assert model.actors_json == '["Al Pacino", "Robert De Niro"]'
        assert model.actors == ["Al Pacino", "Robert De Niro"]

    def test_table_name(self):
        assert MovieModel.__tablename__ == "movies"

    def test_persisted_in_session(self, session):
        session.add(MovieModel(name="Heat", year=1995, genre="Crime"))
        session.commit()

        stored = session.exec(select(MovieModel)).one()
        assert stored.id is not None
        assert stored.genre == "Crime"
        assert stored.created_at is not None
