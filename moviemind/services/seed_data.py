# moviemind/services/seed_data.py

from moviemind.schemas.movie import MovieCreate

# 최초 실행 시 카탈로그
SEED_MOVIES = [
    MovieCreate(
        title="Inception",
        description=(
            "A thief who steals corporate secrets through the use of dream-sharing technology "
            "is given the inverse task of planting an idea into the mind of a C.E.O."
        ),
        poster_url="https://m.media-amazon.com/images/M/MV5BMjAxMzY3NjcxNF5BMl5BanBnXkFtZTcwNTI5OTM0Mw@@._V1_SX300.jpg",
        genre="Action, Adventure, Sci-Fi",
        rating=88,
        release_year=2010,
    ),
    MovieCreate(
        title="The Dark Knight",
        description=(
            "When the menace known as the Joker wreaks havoc and chaos on the people of Gotham, "
            "Batman must accept one of the greatest psychological and physical tests of his "
            "ability to fight injustice."
        ),
        poster_url="https://m.media-amazon.com/images/M/MV5BMTMxNTMwODM0NF5BMl5BanBnXkFtZTcwODAyMTk2Mw@@._V1_SX300.jpg",
        genre="Action, Crime, Drama",
        rating=90,
        release_year=2008,
    ),
    MovieCreate(
        title="Interstellar",
        description=(
            "A team of explorers travel through a wormhole in space in an attempt to ensure "
            "humanity's survival."
        ),
        poster_url="https://m.media-amazon.com/images/M/MV5BZjdkOTU3MDktN2IxOS00OGEyLWFmMjktY2FiMmZkNWIyODZiXkEyXkFqcGdeQXVyMTMxODk2OTU@._V1_SX300.jpg",
        genre="Adventure, Drama, Sci-Fi",
        rating=86,
        release_year=2014,
    ),
    MovieCreate(
        title="The Matrix",
        description=(
            "A computer hacker learns from mysterious rebels about the true nature of his "
            "reality and his role in the war against its controllers."
        ),
        poster_url="https://m.media-amazon.com/images/M/MV5BNzQzOTk3OTAtNDQ0Zi00ZTVkLWI0MTEtMDllZjNkYzNjNTc4L2ltYWdlXkEyXkFqcGdeQXVyNjU0OTQ0OTY@._V1_SX300.jpg",
        genre="Action, Sci-Fi",
        rating=87,
        release_year=1999,
    ),
    MovieCreate(
        title="Pulp Fiction",
        description=(
            "The lives of two mob hitmen, a boxer, a gangster and his wife, and a pair of diner "
            "bandits intertwine in four tales of violence and redemption."
        ),
        poster_url="https://m.media-amazon.com/images/M/MV5BNGNhMDIzZTUtNTBlZi00MTRlLWFjM2ItYzViMjE3YzI5MjljXkEyXkFqcGdeQXVyNzkwMjQ5NzM@._V1_SX300.jpg",
        genre="Crime, Drama",
        rating=89,
        release_year=1994,
    ),
]
