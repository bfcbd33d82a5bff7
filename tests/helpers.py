import io
import zipfile

SAMPLE_EVENT_FILE = """\
id,NYA202304070
version,2
info,visteam,BAL
info,hometeam,NYA
info,site,NYC21
info,date,2023/04/07
start,mullc002,"Cedric Mullins",0,1,8
start,judga001,"Aaron Judge",1,2,9
start,coleg001,"Gerrit Cole",1,0,1
play,1,0,mullc002,22,BCFBX,S7/L
com,"Mullins singles, then steals"
play,1,0,mullc002,00,,SB2
play,1,1,judga001,32,BCFBBX,HR/F9
sub,kahnt001,"Tommy Kahnle",1,0,1
play,2,0,hayso001,01,CX,63/G
data,er,coleg001,0
id,NYA202304080
version,2
info,visteam,BAL
info,wp,bautf001
play,1,0,mullc002,10,BX,K
data,er,kahnt001,1
"""

SAMPLE_PLAY_COUNT = 5


def build_event_zip(members: dict[str, str]) -> bytes:
    """Build a zip archive holding the given ``name -> text`` members."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, text in members.items():
            zf.writestr(name, text.encode("latin-1"))
    return buf.getvalue()
