from .insert_user_function import InsertUserArgs, InsertUserFunction

__all__ = ["InsertUserArgs", "InsertUserFunction"]
