"""
どこで: `engine.render` サブパッケージ。
何を: シーン → 三角形分割 → GPU 転送・描画の入口。FillRenderer/FillMesh/Shader を提供。
なぜ: 図形の寿命管理（core）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
