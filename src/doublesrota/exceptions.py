"""Exceptions for use in Doubles Rota"""

# Doubles Rota
# Copyright (C) 2025  Doubles Rota developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class DoublesRotaException(Exception):
    """Base exception for all Doubles Rota errors.

    All custom exceptions in the application inherit from this class, so the
    GUI can report any application error with a single except clause. The
    exception text is the user-facing message.
    """

    pass


# ========== Player Exceptions ==========


class PlayerException(DoublesRotaException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Round Generation Exceptions ==========


class RoundGenerationException(DoublesRotaException):
    """Base exception for a round that could not be generated.

    The session state is never mutated when one of these is raised.
    """

    pass


class NotEnoughPlayersException(RoundGenerationException):
    """Raised when too few players are present to fill a single court."""

    pass


class CourtGroupingException(RoundGenerationException):
    """Raised when the players to play could not be grouped into any court."""

    pass


class RoundInvariantException(RoundGenerationException):
    """Raised when a generated round breaks the sit-out / court partition."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(DoublesRotaException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when a configuration value is not one of the accepted values."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(DoublesRotaException):
    """Base exception for resource-related errors."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass
