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

import random
import re
import logging

# Outcomes of compare_guess()
TOO_SMALL = "too_small"
TOO_BIG = "too_big"
WIN = "win"

# Optional plus sign, then ASCII digits only.  str.isdigit() and int() both let
# through things like '1_000' or unicode digits, which we don't want.
GUESS_PATTERN = re.compile('[+]?[0-9]+')

# Guesses are unsigned 32 bit numbers, anything else is thrown away.
GUESS_MIN = 0
GUESS_MAX = 2 ** 32 - 1


class guessing_game_engine:
    def __init__(self, rng=None):
        self.__min = 1
        self.__max = 100
        self.__magic_number = 0
        self.__user_guess_count = 0
        self.__initialized = False

        if rng is None:
            rng = random.Random()

        self.__rng = rng

    def initialize_game(self, magic_number=None):
        # The magic number is set exactly once per game.
        if self.__initialized:
            raise RuntimeError("magic number already set for this game")

        self.__user_guess_count = 0
        self.__set_magic_number(magic_number)
        self.__initialized = True

    def __set_magic_number(self, magic_number=None):
        if magic_number is None:
            magic_number = self.__rng.randint(self.__min, self.__max)

        self.__magic_number = int(magic_number)
        logging.debug("magic number is: " + str(self.__magic_number))

    def get_magic_number(self):
        return (self.__magic_number)

    def get_min(self):
        return (self.__min)

    def get_max(self):
        return (self.__max)

    def increase_user_guess_count(self, count):
        self.__user_guess_count += count

    def get_user_guess_count(self):
        return (self.__user_guess_count)

    def parse_guess(self, text):
        """Return the integer in text, or None if text isn't one.

        Surrounding whitespace is ignored.  Negative numbers and anything
        past 4294967295 aren't guesses, but 0 and 500 are (just wrong ones).
        """
        text = text.strip()

        if not GUESS_PATTERN.fullmatch(text):
            return (None)

        guess = int(text)

        if guess < GUESS_MIN or guess > GUESS_MAX:
            return (None)

        return (guess)

    def compare_guess(self, guess):
        if not self.__initialized:
            raise RuntimeError("initialize_game() must be called first")

        self.increase_user_guess_count(1)

        if guess < self.__magic_number:
            return (TOO_SMALL)

        elif guess > self.__magic_number:
            return (TOO_BIG)

        return (WIN)
