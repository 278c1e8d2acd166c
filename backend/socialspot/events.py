"""Socket.IO event names understood and produced by the server."""
from enum import Enum


class Inbound(str, Enum):
    CONNECT = 'connect'
    DISCONNECT = 'disconnect'
    JOIN_APP = 'join_app'
    CHECK_IN = 'check_in'
    SEND_INTERACTION = 'send_interaction'
    SEND_INVITE = 'send_invite'
    ANSWER_INVITE = 'answer_invite'
    PRIVATE_MESSAGE = 'private_message'
    START_GAME = 'start_game'
    ANSWER_QUIZ = 'answer_quiz'


class Outbound(str, Enum):
    APP_JOINED = 'app_joined'
    ROOM_USERS = 'room_users'
    USER_ENTERED = 'user_entered'
    USER_LEFT = 'user_left'
    RECEIVE_INTERACTION = 'receive_interaction'
    RECEIVE_INVITE = 'receive_invite'
    INVITE_ANSWERED = 'invite_answered'
    RECEIVE_PRIVATE_MESSAGE = 'receive_private_message'
    GAME_STARTED = 'game_started'
    SCORE_UPDATE = 'score_update'
