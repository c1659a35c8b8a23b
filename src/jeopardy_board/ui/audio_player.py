from __future__ import annotations

import base64
from typing import Any


def build_autoplay_html(audio_bytes: bytes, player_id: str) -> str:
    """自動再生用の HTML を生成する（autoplay + JS の play() フォールバック）。"""
    b64 = base64.b64encode(audio_bytes).decode("utf-8")
    tpl = (
        """
            <div>
                <audio id="__ID__" src="data:audio/mp3;base64,__SRC__" controls autoplay></audio>
                <button id="__ID___btn" style="display:none;margin-left:8px;">▶ Play</button>
            </div>
            <script>
            (function(){
                var a = document.getElementById("__ID__");
                var b = document.getElementById("__ID___btn");
                function tryPlay(){
                    if (!a || !a.play) return;
                    try { a.currentTime = 0; } catch(e) {}
                    var p = a.play();
                    if (p && p.catch) { p.catch(function(){ b.style.display='inline-block'; }); }
                }
                tryPlay();
                if (b) {
                    b.addEventListener('click', function(){ b.style.display='none'; tryPlay(); });
                }
            })();
            </script>
            """
        .replace("__ID__", player_id)
        .replace("__SRC__", b64)
    )
    return tpl


def render_html(placeholder: Any, html: str) -> None:
    """汎用 HTML をプレースホルダに描画する。"""
    placeholder.markdown(html, unsafe_allow_html=True)
