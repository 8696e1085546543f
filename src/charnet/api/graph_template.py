GRAPH_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Character Network</title>
    <link rel="icon" href="/favicon.ico">
    <style>
        * { margin: 0; padding: 0; box-sizing: border-box; }
        body { background: #ffffff; font-family: "Segoe UI", -apple-system, BlinkMacSystemFont, Roboto, sans-serif; overflow: hidden; }
        #tooltip {
            position: absolute; display: none; pointer-events: none; z-index: 1000;
            padding: 12px 16px; background: #ffffff; color: #323130;
            border: 1px solid #e1dfdd; border-radius: 4px; font-size: 14px;
            box-shadow: 0 6.4px 14.4px 0 rgba(0,0,0,0.132), 0 1.2px 3.6px 0 rgba(0,0,0,0.108);
        }
        #tooltip .name { font-weight: 600; margin-bottom: 4px; }
        #tooltip .group { color: #605e5c; font-size: 12px; }
        #info {
            position: absolute; top: 20px; left: 20px; padding: 20px;
            background: #ffffff; color: #323130; font-size: 14px;
            border: 1px solid #e1dfdd; border-radius: 4px;
            box-shadow: 0 6.4px 14.4px 0 rgba(0,0,0,0.132), 0 1.2px 3.6px 0 rgba(0,0,0,0.108);
        }
        #info h3 { margin-bottom: 16px; color: #0078d4; font-weight: 600; font-size: 18px; }
        #info .row { margin-bottom: 8px; }
        #info .help { font-size: 12px; color: #605e5c; line-height: 1.4; margin-top: 16px; }
    </style>
    <script type="importmap">
    {
        "imports": {
            "three": "https://unpkg.com/three@0.160.0/build/three.module.js",
            "three/addons/": "https://unpkg.com/three@0.160.0/examples/jsm/"
        }
    }
    </script>
</head>
<body>
    <div id="tooltip"><div class="name"></div><div class="group"></div></div>
    <div id="info">
        <h3>Character Network</h3>
        <div class="row"><strong>Characters:</strong> <span id="node-count">-</span></div>
        <div class="row"><strong>Relationships:</strong> <span id="edge-count">-</span></div>
        <div class="help">
            <div>Left drag: rotate</div>
            <div>Right drag: pan</div>
            <div>Scroll: zoom</div>
            <div>Hover: character details</div>
        </div>
    </div>
    <script type="module">
        import * as THREE from 'three';
        import { OrbitControls } from 'three/addons/controls/OrbitControls.js';

        const scene = new THREE.Scene();
        scene.background = new THREE.Color(0xffffff);

        const camera = new THREE.PerspectiveCamera(75, window.innerWidth / window.innerHeight, 0.1, 1000);
        camera.position.set(50, 50, 50);

        const renderer = new THREE.WebGLRenderer({ antialias: true });
        renderer.setSize(window.innerWidth, window.innerHeight);
        renderer.setPixelRatio(Math.min(window.devicePixelRatio, 2));
        document.body.appendChild(renderer.domElement);

        const controls = new OrbitControls(camera, renderer.domElement);
        controls.enableDamping = true;
        controls.dampingFactor = 0.05;
        controls.minDistance = 15;
        controls.maxDistance = 150;

        scene.add(new THREE.AmbientLight(0xffffff, 0.8));
        const key = new THREE.DirectionalLight(0xffffff, 0.6);
        key.position.set(50, 50, 50);
        scene.add(key);
        const fill = new THREE.DirectionalLight(0xffffff, 0.3);
        fill.position.set(-50, -50, -50);
        scene.add(fill);

        const tooltip = document.getElementById('tooltip');
        const meshes = new Map();
        let tooltipOffset = [15, -10];

        async function load() {
            const data = await (await fetch('/graph/data')).json();
            tooltipOffset = data.viewer.tooltip_offset;
            document.getElementById('node-count').textContent = data.nodes.length;
            document.getElementById('edge-count').textContent = data.links.length;

            const byId = new Map(data.nodes.map(n => [n.id, n]));
            const lineMaterial = new THREE.LineBasicMaterial({ color: data.viewer.edge_color, transparent: true, opacity: 0.5 });
            for (const link of data.links) {
                const s = byId.get(link.source), t = byId.get(link.target);
                const geometry = new THREE.BufferGeometry().setFromPoints([
                    new THREE.Vector3(s.x, s.y, s.z), new THREE.Vector3(t.x, t.y, t.z)
                ]);
                scene.add(new THREE.Line(geometry, lineMaterial));
            }
            for (const node of data.nodes) {
                const mesh = new THREE.Mesh(
                    new THREE.SphereGeometry(node.radius, 32, 32),
                    new THREE.MeshLambertMaterial({ color: node.color })
                );
                mesh.position.set(node.x, node.y, node.z);
                mesh.scale.setScalar(node.scale);
                scene.add(mesh);
                meshes.set(node.id, { mesh, node });
            }
        }

        function applyEvent(event) {
            switch (event.type) {
                case 'highlight_applied':
                case 'highlight_reverted': {
                    const entry = meshes.get(event.node_id);
                    if (!entry) break;
                    entry.mesh.material.color.setHex(event.color);
                    entry.mesh.scale.setScalar(event.scale);
                    break;
                }
                case 'tooltip_show':
                    tooltip.querySelector('.name').textContent = event.text;
                    tooltip.querySelector('.group').textContent = 'Group ' + event.group;
                    placeTooltip(lastPointer);
                    tooltip.style.display = 'block';
                    break;
                case 'tooltip_hide':
                    tooltip.style.display = 'none';
                    break;
                case 'cursor':
                    document.body.style.cursor = event.cursor;
                    break;
            }
        }

        // Hover state is kept per viewer on the server
        const viewerId = Date.now().toString(36) + Math.random().toString(36).slice(2, 10);
        let lastPointer = { x: 0, y: 0 };

        function placeTooltip(pointer) {
            tooltip.style.left = (pointer.x + tooltipOffset[0]) + 'px';
            tooltip.style.top = (pointer.y + tooltipOffset[1]) + 'px';
        }

        // Only the latest pointer position matters; drop moves while a request is in flight
        let inFlight = false;
        let pending = null;

        async function sendHover(pointer) {
            if (inFlight) { pending = pointer; return; }
            inFlight = true;
            try {
                const response = await fetch('/graph/hover', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify({
                        camera: {
                            position: camera.position.toArray(),
                            target: controls.target.toArray(),
                            up: camera.up.toArray(),
                            fov: camera.fov,
                            aspect: camera.aspect,
                        },
                        screen_x: pointer.x,
                        screen_y: pointer.y,
                        viewer_id: viewerId,
                        width: window.innerWidth,
                        height: window.innerHeight,
                    }),
                });
                const result = await response.json();
                for (const event of result.events || []) applyEvent(event);
            } finally {
                inFlight = false;
                if (pending) { const next = pending; pending = null; sendHover(next); }
            }
        }

        document.addEventListener('mousemove', e => {
            lastPointer = { x: e.clientX, y: e.clientY };
            placeTooltip(lastPointer);
            sendHover(lastPointer);
        });
        document.addEventListener('mouseleave', async () => {
            const response = await fetch('/graph/hover/leave', {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify({ viewer_id: viewerId }),
            });
            const result = await response.json();
            for (const event of result.events || []) applyEvent(event);
        });

        window.addEventListener('resize', () => {
            camera.aspect = window.innerWidth / window.innerHeight;
            camera.updateProjectionMatrix();
            renderer.setSize(window.innerWidth, window.innerHeight);
        });

        function animate() {
            requestAnimationFrame(animate);
            controls.update();
            renderer.render(scene, camera);
        }

        load().then(animate);
    </script>
</body>
</html>
"""
