from dataclasses import dataclass


class InvalidUserError(Exception):
    pass


@dataclass(frozen=True)
class User:
    """
    A User is an immutable record: a non-negative id, a "first last" name and a non-negative age.
    """
    id: int
    name: str
    age: int
    gender: str
    about: str

    @staticmethod
    def normalize_id(id):
        if id is None or id == "":
            raise InvalidUserError("missing id")

        if isinstance(id, bool):
            raise InvalidUserError("id is not int")

        if isinstance(id, str):
            id = id.strip()
            if not id.isdecimal():
                raise InvalidUserError("found character in id")
            id = int(id)

        if not isinstance(id, int):
            raise InvalidUserError("id is not int")

        if id < 0:
            raise InvalidUserError("id is negative")

        return id

    @staticmethod
    def normalize_name(first_name, last_name):
        first_name = (first_name or "").strip()
        last_name = (last_name or "").strip()

        if not first_name and not last_name:
            raise InvalidUserError("missing name")

        return first_name + " " + last_name

    @staticmethod
    def normalize_age(age):
        if age is None or age == "":
            raise InvalidUserError("missing age")

        if isinstance(age, bool):
            raise InvalidUserError("age is not int")

        if isinstance(age, str):
            age = age.strip()
            if not age.isdecimal():
                raise InvalidUserError("found character in age")
            age = int(age)

        if not isinstance(age, int):
            raise InvalidUserError("age is not int")

        if age < 0:
            raise InvalidUserError("age is negative")

        return age

    @staticmethod
    def normalize_gender(gender):
        if not gender:
            return ""
        return gender.strip()

    @staticmethod
    def normalize_about(about):
        # about is matched by substring, so inner whitespace is kept as-is
        if not about:
            return ""
        return about.strip()

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "age": self.age,
            "gender": self.gender,
            "about": self.about,
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise InvalidUserError(f"row is not a dict: {data!r}")

        if "name" in data:
            name = data.get("name")
            if not name or not str(name).strip():
                raise InvalidUserError("missing name")
            name = str(name).strip()
        else:
            name = User.normalize_name(data.get("first_name"), data.get("last_name"))

        return cls(id=User.normalize_id(data.get("id")),
                   name=name,
                   age=User.normalize_age(data.get("age")),
                   gender=User.normalize_gender(data.get("gender")),
                   about=User.normalize_about(data.get("about")))
