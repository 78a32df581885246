"""Value objects for the player bounded context."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from nexus_player.domain.shared.types import ChannelIdField, GuildIdField, VolumeInt


class PlayerState(Enum):
    """Transport connectivity of a player's subscription."""

    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    def __str__(self) -> str:
        return self.value


class AudioFilter(Enum):
    """Named ffmpeg audio filters understood by the node encoder."""

    BASSBOOST = "bass=g=20:f=110:w=0.3"
    EIGHT_D = "apulsator=hz=0.09"
    VAPORWAVE = "aresample=48000,asetrate=48000*0.8"
    NIGHTCORE = "aresample=48000,asetrate=48000*1.25"
    PHASER = "aphaser=in_gain=0.4"
    TREMOLO = "tremolo"
    VIBRATO = "vibrato=f=6.5"
    REVERSE = "areverse"
    TREBLE = "treble=g=5"
    NORMALIZER = "dynaudnorm=g=101"
    SURROUNDING = "surround"
    PULSATOR = "apulsator=hz=1"
    SUBBOOST = "asubboost"
    KARAOKE = "stereotools=mlev=0.03"
    FLANGER = "flanger"
    GATE = "agate"
    HAAS = "haas"
    MCOMPAND = "mcompand"
    MONO = "pan=mono|c0=.5*c0+.5*c1"
    MSTLR = "stereotools=mode=ms>lr"
    MSTRR = "stereotools=mode=ms>rr"
    CHORUS = "chorus=0.7:0.9:55:0.4:0.25:2"
    CHORUS2D = "chorus=0.6:0.9:50|60:0.4|0.32:0.25|0.4:2|1.3"
    CHORUS3D = "chorus=0.5:0.9:50|60|40:0.4|0.32|0.3:0.25|0.4|0.3:2|2.3|1.3"
    FADEIN = "afade=t=in:ss=0:d=10"
    COMPRESSOR = "compand=points=-80/-105|-62/-80|-15.4/-15.4|0/-12|20/-7.6"
    EXPANDER = "compand=attacks=0:points=-80/-169|-54/-80|-49.5/-64.6|-41.1/-41.1|-25.8/-15|-10.8/-4.5|0/0|20/8.3"
    SOFTLIMITER = "compand=attacks=0:points=-80/-80|-12.4/-12.4|-6/-8|0/-6.8|20/-2.8"

    @classmethod
    def from_name(cls, name: str) -> AudioFilter:
        """Look a filter up by its user-facing name (``"8D"``, ``"bassboost"``)."""
        key = name.strip().upper()
        if key == "8D":
            return cls.EIGHT_D
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown audio filter: {name}") from None


class PlayerOptions(BaseModel):
    """Options needed to build a player for one guild."""

    model_config = ConfigDict(frozen=True)

    guild_id: GuildIdField
    voice_channel_id: ChannelIdField | None = None
    text_channel_id: ChannelIdField | None = None
    volume: VolumeInt | None = None
