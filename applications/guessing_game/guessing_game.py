#!/usr/bin/python3

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License in the file LICENSE.txt or at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys                  # exit(), stdin, stderr
import getopt               # Command line processing
import stomp                # For Apache MQ messaging
import logging              # Log to file, the console belongs to the player
from signal import signal, SIGINT
from stomp.exception import StompException

# This gets our guessing_game_engine class so we can create an object from it
from guessing_game_engine import guessing_game_engine, TOO_SMALL, TOO_BIG, WIN

FEEDBACK = {
    TOO_SMALL: "Too small!",
    TOO_BIG: "Too big!",
    WIN: "You win!",
}

DEFAULT_MQ_PORT = 61613
DEFAULT_LOG_FILE = "guessing_game.log"
DEFAULT_PLAYER = "human"

USAGE = "usage: guessing_game.py [-s mq_server] [-p mq_port] [-l log_file] [--p1 player_name]"


class InputStreamError(Exception):
    """We can't read from the input stream at all.  Not retried."""


# We only ever send, so all the listener does is report problems.
class MyListener(stomp.ConnectionListener):
    def on_error(self, frame):
        print('received an error "%s"' % frame.body, file=sys.stderr)
        logging.error("MQ error: " + str(frame.body))

    def on_disconnected(self):
        logging.debug("disconnected from Apache MQ server")


def connect_to_mq_server(mq_server, mq_port):
    """Open a STOMP connection, or return None if the server isn't there.

    A missing MQ server isn't fatal, the game just stays on the console.
    """
    try:
        stomp_conn = stomp.Connection([(mq_server, mq_port)])
        stomp_conn.set_listener('', MyListener())

        # ActiveMQ defaults to admin/admin.
        stomp_conn.connect('admin', 'admin', wait=True)

    except StompException as e:
        print ("error: could not connect to MQ server " + mq_server + ":" + str(mq_port) + ": " + str(e),
            file=sys.stderr)
        logging.error("MQ connect to " + mq_server + ":" + str(mq_port) + " failed: " + str(e))

        return (None)

    logging.debug("connected to MQ server " + mq_server + ":" + str(mq_port))

    return (stomp_conn)


# Everything the player sees goes through say().  It's printed, and if we have an
# MQ connection it's also sent to the player's output queue so a viewer can show it.
# Body uses the IBCP message format:  to:from:command:payload
class game_output:
    def __init__(self, stomp_conn=None, player=DEFAULT_PLAYER):
        self.stomp_conn = stomp_conn
        self.player = player

    def say(self, message):
        print(message, flush=True)

        if self.stomp_conn:
            try:
                self.stomp_conn.send(body=self.player + ":" + self.player + ":" + "output" + ":" + message,
                    destination="/queue/" + "gg_output_" + self.player)

            except StompException as e:
                print ("error: lost MQ server, continuing without it: " + str(e), file=sys.stderr)
                logging.error("MQ send failed, dropping MQ output: " + str(e))
                self.stomp_conn = None

    def disconnect(self):
        if self.stomp_conn:
            stomp_conn = self.stomp_conn
            self.stomp_conn = None

            try:
                stomp_conn.disconnect()

            except StompException as e:
                logging.error("MQ disconnect failed: " + str(e))


def the_application(engine_object, input_stream, output):
    """Play one game on an initialized engine.  Returns the number of guesses.

    Raises InputStreamError if input_stream runs dry or can't be read.
    Anything parse_guess() won't take is dropped and we just ask again.
    """
    game_complete = False

    output.say("Guess the number!")

    while not game_complete:
        output.say("Please input your guess.")

        try:
            line = input_stream.readline()

        except (OSError, UnicodeDecodeError) as e:
            raise InputStreamError(str(e)) from e

        # readline() gives '' only at end of stream, a blank line is still '\n'
        if not line:
            raise InputStreamError("end of input")

        guess = engine_object.parse_guess(line)

        if guess is None:
            logging.debug("not a number, ignoring: " + repr(line))
            continue

        output.say("You guessed: " + str(guess))

        outcome = engine_object.compare_guess(guess)
        logging.debug("guess " + str(guess) + " -> " + outcome)

        output.say(FEEDBACK[outcome])

        if outcome == WIN:
            game_complete = True

    return (engine_object.get_user_guess_count())


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    mq_server = ""
    mq_port = DEFAULT_MQ_PORT
    log_file = DEFAULT_LOG_FILE
    player = DEFAULT_PLAYER

    try:
        opts, args = getopt.getopt(argv, 's:p:l:', ['p1='])

        for opt, arg in opts:
            if opt == "-s":
                mq_server = arg

            elif opt == "-p":
                mq_port = int(arg)

            elif opt == "-l":
                log_file = arg

            elif opt == "--p1":
                player = arg

    except (getopt.GetoptError, ValueError) as e:
        print ("Getopt error: " + str(e), file=sys.stderr)
        print (USAGE, file=sys.stderr)

        return (2)

    logging.basicConfig(filename=log_file, level=logging.DEBUG)

    logging.debug("---BEGIN GAME---")
    logging.debug("player: " + player)
    logging.debug("mq_server: " + mq_server)
    logging.debug("mq_port: " + str(mq_port))

    stomp_conn = None

    if mq_server:
        stomp_conn = connect_to_mq_server(mq_server, mq_port)

    output = game_output(stomp_conn=stomp_conn, player=player)

    # Handle ctrl-c so the MQ connection gets closed.
    def handler(signal_received, frame):
        print ('ctrl-c caught, cleaning up.')
        logging.debug("ctrl-c caught")

        output.disconnect()
        sys.exit(130)

    previous_handler = signal(SIGINT, handler)

    engine_object = guessing_game_engine()
    engine_object.initialize_game()

    try:
        guess_count = the_application(engine_object, sys.stdin, output)

    except InputStreamError as e:
        logging.error("Failed to read line: " + str(e))
        print ("Failed to read line: " + str(e), file=sys.stderr)

        return (1)

    else:
        logging.debug("won with " + str(guess_count) + " guesses")

    finally:
        output.disconnect()
        signal(SIGINT, previous_handler)
        logging.debug("---END GAME---")

    return (0)


if __name__ == '__main__':
    sys.exit(main())
