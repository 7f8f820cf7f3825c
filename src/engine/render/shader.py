"""
どこで: `engine.render.shader`。
何を: 塗りつぶし三角形用の GLSL（頂点色 + 正射影）を ModernGL プログラムとして生成。
なぜ: シェーダ文字列を一箇所に置き、Renderer からは `create_shader(ctx)` だけで使えるようにするため。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec2 in_vert;
in vec3 in_color;
out vec3 v_color;

void main() {
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
    v_color = in_color;
}
"""

FRAGMENT_SHADER = """
#version 330
uniform float alpha;
in vec3 v_color;
out vec4 frag_color;

void main() {
    frag_color = vec4(v_color, alpha);
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """ModernGL コンテキストからプログラムを生成する。"""
        return ctx.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)


__all__ = ["Shader", "VERTEX_SHADER", "FRAGMENT_SHADER"]
