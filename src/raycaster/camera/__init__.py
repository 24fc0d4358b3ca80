from raycaster.camera.camera import Camera, pixel_color
