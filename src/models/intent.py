"""
IntentLabel — closed enumeration of utterance intents.
"""
from enum import Enum


class IntentLabel(str, Enum):
    """Intent labels in declaration order; `ask_question` is the fallback."""

    BOOK_FLIGHT = "book_flight"
    CHECK_WEATHER = "check_weather"
    FIND_RESTAURANT = "find_restaurant"
    ORDER_FOOD = "order_food"
    GET_DIRECTIONS = "get_directions"
    BOOK_HOTEL = "book_hotel"
    CANCEL_BOOKING = "cancel_booking"
    CHECK_STATUS = "check_status"
    ASK_QUESTION = "ask_question"
    GREETING = "greeting"
    FAREWELL = "farewell"

    def __str__(self) -> str:
        return self.value
